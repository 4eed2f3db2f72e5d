"""Pydantic schemas for accounts, profiles and profile pictures."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class RegisterRequest(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    user_id: int
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    email: Optional[str] = None


class UserRead(BaseModel):
    id: int
    email: str
    password_hash: str
    role: str
    active: bool = True

    model_config = {"from_attributes": True}


class ProfileRead(BaseModel):
    user_id: int
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    user_role: str
    created_at: datetime
    updated_at: datetime
    profile_picture_url: Optional[str] = None

    model_config = {"from_attributes": True}


class ProfilePictureRead(BaseModel):
    user_id: int
    filename: str
    content_type: str
    data: bytes
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
