"""
ExerciseSubmission queries
"""
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from courseware.models import ExerciseSubmission


def find_exercise_submissions_by_user(db: Session, user_id: int) -> List[ExerciseSubmission]:
    """All exercise submissions of a user, oldest first"""
    return (
        db.query(ExerciseSubmission)
        .filter(ExerciseSubmission.user_id == user_id)
        .order_by(ExerciseSubmission.id)
        .all()
    )


def count_passed_exercise_submissions(db: Session, user_id: int) -> int:
    """Number of the user's submissions with passed == True (repeats included)"""
    count = db.query(func.count(ExerciseSubmission.id)).filter(
        ExerciseSubmission.user_id == user_id,
        ExerciseSubmission.passed.is_(True)
    ).scalar()
    return count or 0
