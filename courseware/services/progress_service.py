"""
Section progress tracking service
"""
import logging
from typing import List
from sqlalchemy.orm import Session

from courseware.models import Progress
from courseware.repositories import progress as progress_repository
from courseware.services.achievement_service import achievement_service
from courseware.services.user_service import user_service
from courseware.utils.clock import utcnow

logger = logging.getLogger(__name__)


class ProgressService:
    """
    Service for per-user, per-section completion state

    - One row per (user, chapter, section), created on first touch
    - last_accessed_at refreshed on every update
    - completed_at stamped on the first completion only
    """

    def update_progress(
        self,
        db: Session,
        user_id: int,
        chapter_id: str,
        section_id: str,
        completed: bool
    ) -> Progress:
        """
        Record a visit to a section

        Args:
            db: Database session
            user_id: User id
            chapter_id: Chapter stable id
            section_id: Section id within the chapter
            completed: Whether the section is now complete

        Returns:
            The persisted Progress row
        """
        user_service.get_user(db, user_id)

        now = utcnow()

        progress = progress_repository.find_progress_by_user_and_chapter_and_section(
            db, user_id, chapter_id, section_id
        )

        if not progress:
            progress = Progress(
                user_id=user_id,
                chapter_id=chapter_id,
                section_id=section_id,
                completed=False
            )
            db.add(progress)

        progress.last_accessed_at = now
        progress.completed = completed

        # Never overwritten, even after toggling false -> true again
        if completed and progress.completed_at is None:
            progress.completed_at = now

        db.commit()
        db.refresh(progress)

        logger.info(
            f"Progress updated: user={user_id}, chapter={chapter_id}, "
            f"section={section_id}, completed={completed}"
        )

        if completed:
            achievement_service.trigger(db, user_id)

        return progress

    def list_user_progress(self, db: Session, user_id: int) -> List[Progress]:
        """All progress rows for a user"""
        user_service.get_user(db, user_id)
        return progress_repository.find_progress_by_user(db, user_id)

    def get_completed_chapters_count(self, db: Session, user_id: int) -> int:
        """Distinct chapters in which the user has completed at least one section"""
        user_service.get_user(db, user_id)
        return progress_repository.count_distinct_completed_chapters(db, user_id)


# Global instance
progress_service = ProgressService()
