"""
Section progress API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from courseware.database import get_db
from courseware.schemas.progress import ProgressUpdate, ProgressResponse, ProgressStats
from courseware.services.progress_service import progress_service

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=List[ProgressResponse])
async def get_user_progress(user_id: int, db: Session = Depends(get_db)):
    """Get every section progress row of a user"""
    return progress_service.list_user_progress(db, user_id)


@router.post("", response_model=ProgressResponse)
async def update_progress(update: ProgressUpdate, db: Session = Depends(get_db)):
    """
    Record a section visit

    Completing a section triggers badge evaluation for the user.
    """
    return progress_service.update_progress(
        db,
        user_id=update.user_id,
        chapter_id=update.chapter_id,
        section_id=update.section_id,
        completed=update.completed
    )


@router.get("/stats", response_model=ProgressStats)
async def get_progress_stats(user_id: int, db: Session = Depends(get_db)):
    """Get the number of distinct completed chapters"""
    return ProgressStats(
        completed_chapters=progress_service.get_completed_chapters_count(db, user_id)
    )
