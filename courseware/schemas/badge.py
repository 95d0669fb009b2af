"""
Pydantic schemas for badges and the leaderboard
"""
from pydantic import BaseModel
from datetime import datetime

from courseware.models.badge import BadgeType


class BadgeResponse(BaseModel):
    id: int
    name: str
    description: str
    icon_url: str
    type: BadgeType
    points_required: int

    class Config:
        from_attributes = True


class UserBadgeResponse(BaseModel):
    badge: BadgeResponse
    earned_at: datetime

    class Config:
        from_attributes = True


class LeaderboardEntry(BaseModel):
    """One ranked user"""
    name: str
    badge_count: int
    completed_chapters: int
    total_score: int
