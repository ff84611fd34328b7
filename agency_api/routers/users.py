from __future__ import annotations

from fastapi import APIRouter, Request

from agency_api.domain.errors import (
    DuplicateEmail,
    HashFailure,
    InvalidRole,
    MissingFields,
    NoUpdatableFields,
    NotFound,
    StoreFailure,
)
from agency_api.routers.errors import error_response
from agency_api.schemas import (
    AccountResponse,
    ChangesResponse,
    CreatedResponse,
    DeletedResponse,
    RoleResponse,
    UserCreate,
    UserUpdate,
)
from agency_api.services.account_service import AccountService
from agency_api.services.role_registry import RoleRegistry

router = APIRouter(tags=["users"])


def _get_account_service(request: Request) -> AccountService:
    svc = getattr(getattr(request.app, "state", None), "account_service", None)
    if not svc:
        raise RuntimeError("AccountService not configured")
    return svc


def _get_role_registry(request: Request) -> RoleRegistry:
    registry = getattr(getattr(request.app, "state", None), "role_registry", None)
    if not registry:
        raise RuntimeError("RoleRegistry not configured")
    return registry


@router.get("/users", response_model=list[AccountResponse])
def list_users(request: Request):
    svc = _get_account_service(request)
    try:
        return svc.list_accounts()
    except StoreFailure as exc:
        return error_response(500, exc)


@router.get("/users/{user_id}", response_model=AccountResponse)
def get_user(user_id: int, request: Request):
    svc = _get_account_service(request)
    try:
        return svc.get_account(user_id)
    except NotFound as exc:
        return error_response(404, exc)
    except StoreFailure as exc:
        return error_response(500, exc)


@router.post("/users", response_model=CreatedResponse)
def create_user(payload: UserCreate, request: Request):
    svc = _get_account_service(request)
    try:
        user_id = svc.create_account(
            payload.full_name,
            payload.email,
            payload.role,
            payload.password,
            phone=payload.phone,
        )
    except (MissingFields, InvalidRole) as exc:
        return error_response(400, exc)
    except DuplicateEmail as exc:
        return error_response(409, exc)
    except (StoreFailure, HashFailure) as exc:
        return error_response(500, exc)
    return {"id": user_id}


@router.put("/users/{user_id}", response_model=ChangesResponse)
def update_user(user_id: int, payload: UserUpdate, request: Request):
    svc = _get_account_service(request)
    try:
        changes = svc.update_account(user_id, **payload.model_dump(exclude_none=True))
    except (InvalidRole, NoUpdatableFields) as exc:
        return error_response(400, exc)
    except DuplicateEmail as exc:
        return error_response(409, exc)
    except (StoreFailure, HashFailure) as exc:
        return error_response(500, exc)
    return {"changes": changes}


@router.delete("/users/{user_id}", response_model=DeletedResponse)
def delete_user(user_id: int, request: Request):
    svc = _get_account_service(request)
    try:
        deleted = svc.delete_account(user_id)
    except StoreFailure as exc:
        return error_response(500, exc)
    return {"deleted": deleted}


@router.get("/roles", response_model=list[RoleResponse])
def list_roles(request: Request):
    registry = _get_role_registry(request)
    try:
        return registry.list_roles()
    except StoreFailure as exc:
        return error_response(500, exc)
