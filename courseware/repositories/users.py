"""
User queries
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from courseware.models import User


def find_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """User with the given primary key, or None"""
    return db.query(User).filter(User.id == user_id).first()


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    """User registered under the given email, or None"""
    return db.query(User).filter(User.email == email).first()


def find_all_users(db: Session) -> List[User]:
    """Every user, in insertion order"""
    return db.query(User).order_by(User.id).all()
