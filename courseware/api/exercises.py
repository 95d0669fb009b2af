"""
Exercise submission API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from courseware.database import get_db
from courseware.schemas.exercise import ExerciseSubmissionCreate, ExerciseSubmissionResponse
from courseware.services.exercise_service import exercise_service

router = APIRouter(prefix="/api/exercise", tags=["exercise"])


@router.get("", response_model=List[ExerciseSubmissionResponse])
async def get_user_exercises(user_id: int, db: Session = Depends(get_db)):
    """Get all exercise submissions of a user"""
    return exercise_service.list_user_exercises(db, user_id)


@router.post("", response_model=ExerciseSubmissionResponse, status_code=201)
async def submit_exercise(submission: ExerciseSubmissionCreate, db: Session = Depends(get_db)):
    """Submit exercise code; passing submissions trigger badge evaluation"""
    return exercise_service.submit_exercise(
        db,
        user_id=submission.user_id,
        chapter_id=submission.chapter_id,
        exercise_id=submission.exercise_id,
        code=submission.code
    )
