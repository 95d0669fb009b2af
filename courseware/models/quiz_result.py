"""
QuizResult model - append-only quiz history
"""
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey
from courseware.database import Base
from courseware.utils.clock import utcnow


class QuizResult(Base):
    """
    Quiz results table - one immutable row per submission
    """
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    chapter_id = Column(String(255), nullable=False)
    total_questions = Column(Integer, nullable=False)
    correct_answers = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)  # 0-100, truncated
    completed_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    answers = Column(Text)  # opaque client payload

    def __repr__(self):
        return f"<QuizResult(user_id={self.user_id}, chapter_id={self.chapter_id}, score={self.score})>"
