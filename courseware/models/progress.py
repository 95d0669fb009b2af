"""
Progress model - per-user, per-section completion state
"""
from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP, ForeignKey, UniqueConstraint
from courseware.database import Base
from courseware.utils.clock import utcnow


class Progress(Base):
    """
    Progress table - upserted by (user, chapter, section), never appended
    """
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "chapter_id", "section_id", name="uq_progress_user_chapter_section"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    chapter_id = Column(String(255), nullable=False)
    section_id = Column(String(255), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    last_accessed_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    completed_at = Column(TIMESTAMP)  # set once, on the first completion

    def __repr__(self):
        return (
            f"<Progress(user_id={self.user_id}, chapter_id={self.chapter_id}, "
            f"section_id={self.section_id}, completed={self.completed})>"
        )
