"""
ExerciseSubmission model - append-only exercise history
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP, ForeignKey
from courseware.database import Base
from courseware.utils.clock import utcnow


class ExerciseSubmission(Base):
    """
    Exercise submissions table - one immutable row per submission
    """
    __tablename__ = "exercise_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    chapter_id = Column(String(255), nullable=False)
    exercise_id = Column(String(255), nullable=False)
    code = Column(Text, nullable=False)
    passed = Column(Boolean, nullable=False)
    feedback = Column(Text)
    submitted_at = Column(TIMESTAMP, nullable=False, default=utcnow)

    def __repr__(self):
        return (
            f"<ExerciseSubmission(user_id={self.user_id}, exercise_id={self.exercise_id}, "
            f"passed={self.passed})>"
        )
