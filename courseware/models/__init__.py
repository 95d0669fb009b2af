"""
Database models package
"""
from courseware.models.user import User
from courseware.models.user_preferences import UserPreferences, OperatingSystem, BuildTool, IDE
from courseware.models.chapter import Chapter
from courseware.models.progress import Progress
from courseware.models.quiz_result import QuizResult
from courseware.models.exercise_submission import ExerciseSubmission
from courseware.models.badge import Badge, BadgeType, UserBadge

__all__ = [
    "User",
    "UserPreferences",
    "OperatingSystem",
    "BuildTool",
    "IDE",
    "Chapter",
    "Progress",
    "QuizResult",
    "ExerciseSubmission",
    "Badge",
    "BadgeType",
    "UserBadge",
]
