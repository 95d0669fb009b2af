"""
Badge and leaderboard API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from courseware.database import get_db
from courseware.schemas.badge import BadgeResponse, UserBadgeResponse, LeaderboardEntry
from courseware.services.achievement_service import achievement_service
from courseware.services.leaderboard_service import leaderboard_service

router = APIRouter(prefix="/api/badge", tags=["badges"])


@router.get("/all", response_model=List[BadgeResponse])
async def get_all_badges(db: Session = Depends(get_db)):
    """Get the badge catalog"""
    return achievement_service.list_badges(db)


@router.get("/user", response_model=List[UserBadgeResponse])
async def get_user_badges(user_id: int, db: Session = Depends(get_db)):
    """Get the badges a user has earned"""
    return achievement_service.list_user_badges(db, user_id)


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(db: Session = Depends(get_db)):
    """Get the top users by total quiz score"""
    return leaderboard_service.top_entries(db)
