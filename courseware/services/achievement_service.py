"""
Achievement engine - badge award rules over aggregated learner history

Rules are independent and all of them are evaluated on every run:

    First Chapter   distinct completed chapters >= 1
    Five Chapters   distinct completed chapters >= 5
    Ten Chapters    distinct completed chapters >= 10
    Quiz Master     quiz results scoring 100    >= 5
    Code Ninja      passed exercise submissions >= 10

A badge is issued at most once per user. The application checks for an
existing award first, and the (user_id, badge_id) unique constraint on
user_badges rejects the loser of any concurrent race; that rejection is
treated as "already awarded".
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courseware.models import Badge, BadgeType, UserBadge
from courseware.repositories import badges as badge_repository
from courseware.repositories import exercises as exercise_repository
from courseware.repositories import progress as progress_repository
from courseware.repositories import quiz_results as quiz_result_repository
from courseware.services.user_service import user_service
from courseware.utils.clock import utcnow

logger = logging.getLogger(__name__)

PERFECT_SCORE = 100

METRIC_COMPLETED_CHAPTERS = "completed_chapters"
METRIC_PERFECT_QUIZZES = "perfect_quizzes"
METRIC_PASSED_EXERCISES = "passed_exercises"


@dataclass(frozen=True)
class BadgeRule:
    badge_name: str
    metric: str
    threshold: int


BADGE_RULES = (
    BadgeRule("First Chapter", METRIC_COMPLETED_CHAPTERS, 1),
    BadgeRule("Five Chapters", METRIC_COMPLETED_CHAPTERS, 5),
    BadgeRule("Ten Chapters", METRIC_COMPLETED_CHAPTERS, 10),
    BadgeRule("Quiz Master", METRIC_PERFECT_QUIZZES, 5),
    BadgeRule("Code Ninja", METRIC_PASSED_EXERCISES, 10),
)

# Reference badge catalog, inserted once into an empty table
DEFAULT_BADGES = (
    {
        "name": "First Chapter",
        "description": "Complete your first chapter",
        "icon_url": "/badges/first-chapter.png",
        "type": BadgeType.CHAPTER_COMPLETION,
        "points_required": 1,
    },
    {
        "name": "Five Chapters",
        "description": "Complete five chapters",
        "icon_url": "/badges/five-chapters.png",
        "type": BadgeType.CHAPTER_COMPLETION,
        "points_required": 5,
    },
    {
        "name": "Ten Chapters",
        "description": "Complete ten chapters",
        "icon_url": "/badges/ten-chapters.png",
        "type": BadgeType.CHAPTER_COMPLETION,
        "points_required": 10,
    },
    {
        "name": "Quiz Master",
        "description": "Score 100% on five quizzes",
        "icon_url": "/badges/quiz-master.png",
        "type": BadgeType.QUIZ_MASTER,
        "points_required": 5,
    },
    {
        "name": "Code Ninja",
        "description": "Complete 10 coding exercises",
        "icon_url": "/badges/code-ninja.png",
        "type": BadgeType.EXERCISE_MASTER,
        "points_required": 10,
    },
    {
        "name": "Spring Boot Hero",
        "description": "Complete all chapters with 90%+ average",
        "icon_url": "/badges/spring-boot-hero.png",
        "type": BadgeType.SPECIAL,
        "points_required": 100,
    },
)


class AchievementService:
    """Evaluates badge rules and issues awards"""

    def __init__(self, rules=BADGE_RULES):
        self.rules = tuple(rules)
        self._metrics: Dict[str, Callable[[Session, int], int]] = {
            METRIC_COMPLETED_CHAPTERS: progress_repository.count_distinct_completed_chapters,
            METRIC_PERFECT_QUIZZES: lambda db, user_id: quiz_result_repository.count_quiz_results_with_score(
                db, user_id, PERFECT_SCORE
            ),
            METRIC_PASSED_EXERCISES: exercise_repository.count_passed_exercise_submissions,
        }

    def evaluate(self, db: Session, user_id: int) -> List[str]:
        """
        Evaluate every rule for a user and award newly earned badges

        Args:
            db: Database session
            user_id: User id

        Returns:
            Names of badges issued by this call (empty if nothing new)
        """
        user_service.get_user(db, user_id)

        # One aggregate query per metric, shared by the rules that use it
        values = {name: compute(db, user_id) for name, compute in self._metrics.items()}

        issued = []
        for rule in self.rules:
            if values[rule.metric] < rule.threshold:
                continue
            if self._award(db, user_id, rule.badge_name):
                issued.append(rule.badge_name)

        logger.debug(
            f"Achievements evaluated: user={user_id}, metrics={values}, issued={issued}"
        )

        return issued

    def trigger(self, db: Session, user_id: int) -> List[str]:
        """
        Evaluate after an activity write has been committed

        A failure here is logged and swallowed: the triggering write stays
        committed whether or not evaluation succeeds.
        """
        try:
            return self.evaluate(db, user_id)
        except Exception as e:
            db.rollback()
            logger.error(f"Achievement evaluation failed for user {user_id}: {str(e)}", exc_info=True)
            return []

    def _award(self, db: Session, user_id: int, badge_name: str) -> bool:
        """Create the user badge unless it already exists; True if created"""
        badge = badge_repository.find_badge_by_name(db, badge_name)
        if badge is None:
            # Catalog not seeded yet
            return False

        if badge_repository.find_user_badge(db, user_id, badge.id) is not None:
            return False

        db.add(UserBadge(user_id=user_id, badge_id=badge.id, earned_at=utcnow()))
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.debug(f"Badge already awarded concurrently: user={user_id}, badge={badge_name}")
            return False

        logger.info(f"Badge awarded: user={user_id}, badge={badge_name}")
        return True

    def seed_badges(self, db: Session) -> int:
        """
        Insert the reference badge catalog if the badge table is empty

        Returns:
            Number of badges inserted
        """
        if badge_repository.count_badges(db) > 0:
            return 0

        for data in DEFAULT_BADGES:
            db.add(Badge(**data))
        db.commit()

        logger.info(f"Seeded {len(DEFAULT_BADGES)} badges")
        return len(DEFAULT_BADGES)

    def list_badges(self, db: Session) -> List[Badge]:
        """The badge catalog"""
        return badge_repository.find_all_badges(db)

    def list_user_badges(self, db: Session, user_id: int) -> List[UserBadge]:
        """
        Badges earned by a user

        Raises:
            NotFoundError: if the user does not exist
        """
        user_service.get_user(db, user_id)
        return badge_repository.find_user_badges_by_user(db, user_id)


# Global instance
achievement_service = AchievementService()
