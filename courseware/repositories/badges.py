"""
Badge and UserBadge queries
"""
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from courseware.models import Badge, UserBadge


def find_all_badges(db: Session) -> List[Badge]:
    """Badge catalog in seed order"""
    return db.query(Badge).order_by(Badge.id).all()


def find_badge_by_name(db: Session, name: str) -> Optional[Badge]:
    """Badge with the given unique name, or None if not seeded"""
    return db.query(Badge).filter(Badge.name == name).first()


def count_badges(db: Session) -> int:
    """Size of the badge catalog"""
    return db.query(func.count(Badge.id)).scalar() or 0


def find_user_badge(db: Session, user_id: int, badge_id: int) -> Optional[UserBadge]:
    """The award of one badge to one user, or None"""
    return db.query(UserBadge).filter(
        UserBadge.user_id == user_id,
        UserBadge.badge_id == badge_id
    ).first()


def find_user_badges_by_user(db: Session, user_id: int) -> List[UserBadge]:
    """All badges earned by a user, earliest first"""
    return (
        db.query(UserBadge)
        .filter(UserBadge.user_id == user_id)
        .order_by(UserBadge.earned_at, UserBadge.id)
        .all()
    )


def count_user_badges(db: Session, user_id: int) -> int:
    """Number of badges earned by a user"""
    return db.query(func.count(UserBadge.id)).filter(UserBadge.user_id == user_id).scalar() or 0
