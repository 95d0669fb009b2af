"""
Quiz result recording and scoring service
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from courseware.exceptions import InvalidArgumentError
from courseware.models import QuizResult
from courseware.repositories import quiz_results as quiz_result_repository
from courseware.services.achievement_service import achievement_service
from courseware.services.user_service import user_service
from courseware.utils.clock import utcnow

logger = logging.getLogger(__name__)


def calculate_score(total_questions: int, correct_answers: int) -> int:
    """
    Percentage score, truncated toward zero

    7/10 -> 70, 1/3 -> 33, 2/3 -> 66

    Raises:
        InvalidArgumentError: if total_questions <= 0 or correct_answers is
            outside 0..total_questions
    """
    if total_questions <= 0:
        raise InvalidArgumentError(f"total_questions must be positive, got {total_questions}")
    if correct_answers < 0 or correct_answers > total_questions:
        raise InvalidArgumentError(
            f"correct_answers must be between 0 and {total_questions}, got {correct_answers}"
        )

    # Integer arithmetic avoids float truncation surprises (e.g. 29/100*100)
    return (correct_answers * 100) // total_questions


class QuizService:
    """Service for append-only quiz history"""

    def submit_quiz_result(
        self,
        db: Session,
        user_id: int,
        chapter_id: str,
        total_questions: int,
        correct_answers: int,
        answers: Optional[str] = None
    ) -> QuizResult:
        """
        Record a completed quiz attempt

        Args:
            db: Database session
            user_id: User id
            chapter_id: Chapter the quiz belongs to
            total_questions: Number of questions asked (> 0)
            correct_answers: Number answered correctly
            answers: Opaque answer payload stored as-is

        Returns:
            The new QuizResult row
        """
        score = calculate_score(total_questions, correct_answers)
        user_service.get_user(db, user_id)

        result = QuizResult(
            user_id=user_id,
            chapter_id=chapter_id,
            total_questions=total_questions,
            correct_answers=correct_answers,
            score=score,
            answers=answers,
            completed_at=utcnow()
        )

        db.add(result)
        db.commit()
        db.refresh(result)

        logger.info(
            f"Quiz result saved: user={user_id}, chapter={chapter_id}, "
            f"score={score} ({correct_answers}/{total_questions})"
        )

        achievement_service.trigger(db, user_id)

        return result

    def list_user_quiz_results(self, db: Session, user_id: int) -> List[QuizResult]:
        """All quiz results of a user"""
        user_service.get_user(db, user_id)
        return quiz_result_repository.find_quiz_results_by_user(db, user_id)

    def list_chapter_quiz_results(self, db: Session, user_id: int, chapter_id: str) -> List[QuizResult]:
        """Quiz results of a user for one chapter"""
        user_service.get_user(db, user_id)
        return quiz_result_repository.find_quiz_results_by_user_and_chapter(db, user_id, chapter_id)


# Global instance
quiz_service = QuizService()
