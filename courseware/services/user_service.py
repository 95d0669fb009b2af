"""
User lookup and provisioning service
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from courseware.exceptions import NotFoundError
from courseware.models import User, UserPreferences, OperatingSystem, BuildTool, IDE
from courseware.repositories import users as user_repository
from courseware.repositories import user_preferences as preferences_repository

logger = logging.getLogger(__name__)


class UserService:
    """Resolves users for activity operations"""

    def get_user(self, db: Session, user_id: int) -> User:
        """
        Get a user by id

        Raises:
            NotFoundError: if no such user exists
        """
        user = user_repository.find_user_by_id(db, user_id)
        if not user:
            raise NotFoundError(f"User not found: {user_id}")
        return user

    def register_user(
        self,
        db: Session,
        email: str,
        name: str,
        picture_url: Optional[str] = None
    ) -> User:
        """
        Find a user by email or create one

        Called by the auth layer after a successful sign-in; repeated calls
        for the same email return the existing row unchanged.
        """
        user = user_repository.find_user_by_email(db, email)
        if user:
            return user

        user = User(email=email, name=name, picture_url=picture_url)
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"User registered: id={user.id}, email={email}")

        return user

    def get_user_preferences(self, db: Session, user_id: int) -> Optional[UserPreferences]:
        """
        Get a user's saved preferences

        Returns:
            The preferences row, or None if the user never saved any

        Raises:
            NotFoundError: if the user does not exist
        """
        self.get_user(db, user_id)
        return preferences_repository.find_preferences_by_user(db, user_id)

    def update_user_preferences(
        self,
        db: Session,
        user_id: int,
        operating_system: OperatingSystem,
        build_tool: BuildTool,
        java_version: str,
        ide: IDE
    ) -> UserPreferences:
        """
        Create or overwrite a user's preferences

        All four fields are replaced on every call.
        """
        self.get_user(db, user_id)

        preferences = preferences_repository.find_preferences_by_user(db, user_id)
        if not preferences:
            preferences = UserPreferences(user_id=user_id)
            db.add(preferences)

        preferences.operating_system = operating_system
        preferences.build_tool = build_tool
        preferences.java_version = java_version
        preferences.ide = ide

        db.commit()
        db.refresh(preferences)

        logger.info(
            f"Preferences updated: user={user_id}, os={operating_system.value}, "
            f"build_tool={build_tool.value}, java={java_version}, ide={ide.value}"
        )

        return preferences


# Global instance
user_service = UserService()
