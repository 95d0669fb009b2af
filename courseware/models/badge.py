"""
Badge and UserBadge models - achievement reference data and awards
"""
import enum
from sqlalchemy import Column, Integer, String, TIMESTAMP, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from courseware.database import Base
from courseware.utils.clock import utcnow


class BadgeType(str, enum.Enum):
    CHAPTER_COMPLETION = "CHAPTER_COMPLETION"
    QUIZ_MASTER = "QUIZ_MASTER"
    EXERCISE_MASTER = "EXERCISE_MASTER"
    STREAK = "STREAK"
    SPECIAL = "SPECIAL"


class Badge(Base):
    """
    Badges table - static reference data seeded at startup
    """
    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(255), nullable=False)
    icon_url = Column(String(255), nullable=False)
    type = Column(Enum(BadgeType, name="badge_type"), nullable=False)
    points_required = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Badge(name={self.name}, type={self.type})>"


class UserBadge(Base):
    """
    User badges table - at most one row per (user, badge)

    The unique constraint is what makes concurrent awards safe; the
    application-level existence check only avoids needless inserts.
    """
    __tablename__ = "user_badges"
    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="uq_user_badges_user_badge"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    badge_id = Column(Integer, ForeignKey("badges.id"), nullable=False)
    earned_at = Column(TIMESTAMP, nullable=False, default=utcnow)

    user = relationship("User", back_populates="badges")
    badge = relationship("Badge", lazy="joined")

    def __repr__(self):
        return f"<UserBadge(user_id={self.user_id}, badge_id={self.badge_id})>"
