"""
Pydantic schemas for users
"""
from pydantic import BaseModel, Field
from typing import Optional

from courseware.models import OperatingSystem, BuildTool, IDE
from datetime import datetime


class UserCreate(BaseModel):
    """Registration payload sent by the auth layer"""
    email: str = Field(..., max_length=255)
    name: str = Field(..., max_length=255)
    picture_url: Optional[str] = Field(None, max_length=512)


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    picture_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class PreferencesUpdate(BaseModel):
    """Development environment choices; all four fields are replaced"""
    operating_system: OperatingSystem
    build_tool: BuildTool
    java_version: str = Field(..., min_length=1, max_length=20)
    ide: IDE


class PreferencesResponse(BaseModel):
    operating_system: OperatingSystem
    build_tool: BuildTool
    java_version: str
    ide: IDE
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    """A user together with their saved preferences"""
    user: UserResponse
    preferences: Optional[PreferencesResponse] = None
