"""
UserPreferences queries
"""
from typing import Optional
from sqlalchemy.orm import Session
from courseware.models import UserPreferences


def find_preferences_by_user(db: Session, user_id: int) -> Optional[UserPreferences]:
    """The preferences row of a user, or None if never saved"""
    return db.query(UserPreferences).filter(UserPreferences.user_id == user_id).first()
