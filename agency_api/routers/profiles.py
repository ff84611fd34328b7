from __future__ import annotations

from fastapi import APIRouter, Request

from agency_api.domain.errors import DuplicateProfile, MissingFields, NotFound, StoreFailure
from agency_api.routers.errors import error_response
from agency_api.schemas import (
    AgentProfileCreate,
    AgentProfileResponse,
    ClubCreate,
    ClubResponse,
    CreatedResponse,
    PlayerProfileCreate,
    PlayerProfileResponse,
)
from agency_api.services.profile_service import ProfileService

router = APIRouter(tags=["profiles"])


def _get_profile_service(request: Request) -> ProfileService:
    svc = getattr(getattr(request.app, "state", None), "profile_service", None)
    if not svc:
        raise RuntimeError("ProfileService not configured")
    return svc


def _create(action):
    try:
        return {"id": action()}
    except MissingFields as exc:
        return error_response(400, exc)
    except NotFound as exc:
        return error_response(404, exc)
    except DuplicateProfile as exc:
        return error_response(409, exc)
    except StoreFailure as exc:
        return error_response(500, exc)


def _fetch(action):
    try:
        return action()
    except NotFound as exc:
        return error_response(404, exc)
    except StoreFailure as exc:
        return error_response(500, exc)


@router.post("/players", response_model=CreatedResponse)
def create_player(payload: PlayerProfileCreate, request: Request):
    svc = _get_profile_service(request)
    fields = payload.model_dump(exclude={"user_id"})
    return _create(lambda: svc.create_player_profile(payload.user_id, **fields))


@router.get("/players/{profile_id}", response_model=PlayerProfileResponse)
def get_player(profile_id: int, request: Request):
    svc = _get_profile_service(request)
    return _fetch(lambda: svc.get_player_profile(profile_id))


@router.post("/agents", response_model=CreatedResponse)
def create_agent(payload: AgentProfileCreate, request: Request):
    svc = _get_profile_service(request)
    fields = payload.model_dump(exclude={"user_id"})
    return _create(lambda: svc.create_agent_profile(payload.user_id, **fields))


@router.get("/agents/{profile_id}", response_model=AgentProfileResponse)
def get_agent(profile_id: int, request: Request):
    svc = _get_profile_service(request)
    return _fetch(lambda: svc.get_agent_profile(profile_id))


@router.post("/clubs", response_model=CreatedResponse)
def create_club(payload: ClubCreate, request: Request):
    svc = _get_profile_service(request)
    return _create(lambda: svc.create_club(payload.name, payload.country, payload.manager_user_id))


@router.get("/clubs/{club_id}", response_model=ClubResponse)
def get_club(club_id: int, request: Request):
    svc = _get_profile_service(request)
    return _fetch(lambda: svc.get_club(club_id))
