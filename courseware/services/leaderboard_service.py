"""
Leaderboard service - ranks users by cumulative quiz score
"""
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from courseware.config import settings
from courseware.repositories import badges as badge_repository
from courseware.repositories import progress as progress_repository
from courseware.repositories import quiz_results as quiz_result_repository
from courseware.repositories import users as user_repository

logger = logging.getLogger(__name__)


class LeaderboardService:
    """
    Computes the leaderboard on demand (no caching)

    Entries are sorted by total_score descending. Ties keep whatever order
    the users were read in; no secondary key is applied.
    """

    def top_entries(self, db: Session, limit: int = None) -> List[Dict[str, Any]]:
        """
        Get the top users by cumulative quiz score

        Args:
            db: Database session
            limit: Maximum entries (default from settings)

        Returns:
            List of {name, badge_count, completed_chapters, total_score}
        """
        limit = settings.LEADERBOARD_LIMIT if limit is None else limit
        if limit <= 0:
            return []

        entries = []
        for user in user_repository.find_all_users(db):
            entries.append({
                "name": user.name,
                "badge_count": badge_repository.count_user_badges(db, user.id),
                "completed_chapters": progress_repository.count_distinct_completed_chapters(db, user.id),
                "total_score": quiz_result_repository.sum_quiz_scores(db, user.id)
            })

        entries.sort(key=lambda x: x["total_score"], reverse=True)

        logger.debug(f"Leaderboard computed over {len(entries)} users")

        return entries[:limit]


# Global instance
leaderboard_service = LeaderboardService()
