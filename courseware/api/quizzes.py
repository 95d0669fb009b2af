"""
Quiz result API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from courseware.database import get_db
from courseware.schemas.quiz import QuizSubmission, QuizResultResponse
from courseware.services.quiz_service import quiz_service

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get("", response_model=List[QuizResultResponse])
async def get_user_quiz_results(user_id: int, db: Session = Depends(get_db)):
    """Get all quiz results of a user"""
    return quiz_service.list_user_quiz_results(db, user_id)


@router.get("/chapter/{chapter_id}", response_model=List[QuizResultResponse])
async def get_chapter_quiz_results(chapter_id: str, user_id: int, db: Session = Depends(get_db)):
    """Get a user's quiz results for one chapter"""
    return quiz_service.list_chapter_quiz_results(db, user_id, chapter_id)


@router.post("", response_model=QuizResultResponse, status_code=201)
async def submit_quiz(submission: QuizSubmission, db: Session = Depends(get_db)):
    """
    Submit a quiz result

    - score = correct / total * 100, truncated
    - total_questions must be positive (400 otherwise)
    - Triggers badge evaluation
    """
    return quiz_service.submit_quiz_result(
        db,
        user_id=submission.user_id,
        chapter_id=submission.chapter_id,
        total_questions=submission.total_questions,
        correct_answers=submission.correct_answers,
        answers=submission.answers
    )
