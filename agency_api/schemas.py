"""
Pydantic models for API request/response validation.

Request bodies keep every field optional so that missing values reach the
services, which answer with the domain errors (MissingFields, NoUpdatableFields)
instead of a generic 422. Bodies that are absent, not an object, or carry a
mistyped field are mapped to the same errors by ``routers.errors``.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class UserCreate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class UserUpdate(BaseModel):
    """Partial update; absent or empty fields are left untouched."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class AccountResponse(BaseModel):
    """Public account projection. Never carries the password hash."""

    id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    role: str


class RoleResponse(BaseModel):
    id: int
    name: str


class CreatedResponse(BaseModel):
    id: int


class ChangesResponse(BaseModel):
    changes: int


class DeletedResponse(BaseModel):
    deleted: int


class PlayerProfileCreate(BaseModel):
    user_id: Optional[int] = None
    position: Optional[str] = None
    height_cm: Optional[int] = None
    weight_kg: Optional[int] = None
    nationality: Optional[str] = None
    dob: Optional[date] = None
    bio: Optional[str] = None


class PlayerProfileResponse(BaseModel):
    id: int
    user_id: int
    position: Optional[str] = None
    height_cm: Optional[int] = None
    weight_kg: Optional[int] = None
    nationality: Optional[str] = None
    dob: Optional[date] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None


class AgentProfileCreate(BaseModel):
    user_id: Optional[int] = None
    agency_name: Optional[str] = None
    license_number: Optional[str] = None
    region: Optional[str] = None


class AgentProfileResponse(BaseModel):
    id: int
    user_id: int
    agency_name: Optional[str] = None
    license_number: Optional[str] = None
    region: Optional[str] = None
    created_at: Optional[datetime] = None


class ClubCreate(BaseModel):
    name: Optional[str] = None
    country: Optional[str] = None
    manager_user_id: Optional[int] = None


class ClubResponse(BaseModel):
    id: int
    name: str
    country: Optional[str] = None
    manager_user_id: Optional[int] = None
    created_at: Optional[datetime] = None
