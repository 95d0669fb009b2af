"""
QuizResult queries
"""
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from courseware.models import QuizResult


def find_quiz_results_by_user(db: Session, user_id: int) -> List[QuizResult]:
    """All quiz results of a user, oldest first"""
    return (
        db.query(QuizResult)
        .filter(QuizResult.user_id == user_id)
        .order_by(QuizResult.id)
        .all()
    )


def find_quiz_results_by_user_and_chapter(db: Session, user_id: int, chapter_id: str) -> List[QuizResult]:
    """Quiz results of a user for one chapter, oldest first"""
    return (
        db.query(QuizResult)
        .filter(QuizResult.user_id == user_id, QuizResult.chapter_id == chapter_id)
        .order_by(QuizResult.id)
        .all()
    )


def count_quiz_results_with_score(db: Session, user_id: int, score: int) -> int:
    """Number of the user's quiz results with exactly this score"""
    count = db.query(func.count(QuizResult.id)).filter(
        QuizResult.user_id == user_id,
        QuizResult.score == score
    ).scalar()
    return count or 0


def sum_quiz_scores(db: Session, user_id: int) -> int:
    """Sum of score over all of the user's quiz results (0 when none)"""
    total = db.query(func.coalesce(func.sum(QuizResult.score), 0)).filter(
        QuizResult.user_id == user_id
    ).scalar()
    return int(total or 0)
