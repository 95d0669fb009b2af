"""
Exercise submission service

Verdicts come from a length-based placeholder; compiling and running the
submitted code is not implemented.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from courseware.config import settings
from courseware.models import ExerciseSubmission
from courseware.repositories import exercises as exercise_repository
from courseware.services.achievement_service import achievement_service
from courseware.services.user_service import user_service
from courseware.utils.clock import utcnow

logger = logging.getLogger(__name__)

FEEDBACK_PASSED = "Great job! Your solution is correct."
FEEDBACK_FAILED = "Keep trying! Review the requirements and try again."


class ExerciseService:
    """Service for append-only exercise submissions"""

    def __init__(self, min_code_length: int = None):
        self.min_code_length = (
            settings.EXERCISE_MIN_CODE_LENGTH if min_code_length is None else min_code_length
        )

    def validate_code(self, code: Optional[str]) -> bool:
        """
        Placeholder verdict

        Passes when the code is non-blank and strictly longer than
        min_code_length characters (untrimmed length).
        """
        return code is not None and bool(code.strip()) and len(code) > self.min_code_length

    def submit_exercise(
        self,
        db: Session,
        user_id: int,
        chapter_id: str,
        exercise_id: str,
        code: Optional[str]
    ) -> ExerciseSubmission:
        """
        Record an exercise submission with its verdict

        Achievements are evaluated only for passing submissions.
        """
        user_service.get_user(db, user_id)

        passed = self.validate_code(code)

        submission = ExerciseSubmission(
            user_id=user_id,
            chapter_id=chapter_id,
            exercise_id=exercise_id,
            code=code or "",
            passed=passed,
            feedback=FEEDBACK_PASSED if passed else FEEDBACK_FAILED,
            submitted_at=utcnow()
        )

        db.add(submission)
        db.commit()
        db.refresh(submission)

        logger.info(
            f"Exercise submitted: user={user_id}, chapter={chapter_id}, "
            f"exercise={exercise_id}, passed={passed}"
        )

        if passed:
            achievement_service.trigger(db, user_id)

        return submission

    def list_user_exercises(self, db: Session, user_id: int) -> List[ExerciseSubmission]:
        """All exercise submissions of a user"""
        user_service.get_user(db, user_id)
        return exercise_repository.find_exercise_submissions_by_user(db, user_id)


# Global instance
exercise_service = ExerciseService()
