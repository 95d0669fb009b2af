"""
User provisioning API endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from courseware.database import get_db
from courseware.schemas.user import (
    UserCreate,
    UserResponse,
    PreferencesUpdate,
    PreferencesResponse,
    ProfileResponse,
)
from courseware.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def register_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Find or create a user by email"""
    return user_service.register_user(db, payload.email, payload.name, payload.picture_url)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a user by id"""
    return user_service.get_user(db, user_id)


@router.get("/{user_id}/profile", response_model=ProfileResponse)
async def get_profile(user_id: int, db: Session = Depends(get_db)):
    """Get a user and their preferences in one response"""
    user = user_service.get_user(db, user_id)
    preferences = user_service.get_user_preferences(db, user_id)
    return ProfileResponse(
        user=UserResponse.model_validate(user),
        preferences=PreferencesResponse.model_validate(preferences) if preferences else None
    )


@router.get("/{user_id}/preferences", response_model=Optional[PreferencesResponse])
async def get_preferences(user_id: int, db: Session = Depends(get_db)):
    """Get saved preferences; null when the user has not set any"""
    return user_service.get_user_preferences(db, user_id)


@router.put("/{user_id}/preferences", response_model=PreferencesResponse)
async def update_preferences(
    user_id: int,
    payload: PreferencesUpdate,
    db: Session = Depends(get_db)
):
    """Create or replace a user's preferences"""
    return user_service.update_user_preferences(
        db,
        user_id,
        payload.operating_system,
        payload.build_tool,
        payload.java_version,
        payload.ide
    )
