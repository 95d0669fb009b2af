"""
Chapter model - one row per content directory
"""
from sqlalchemy import Column, String, Integer, Boolean, TIMESTAMP
from courseware.database import Base
from courseware.utils.clock import utcnow


class Chapter(Base):
    """
    Chapters table - written only by the catalog synchronizer
    """
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chapter_id = Column(String(255), unique=True, nullable=False, index=True)  # "01-introduction"
    title = Column(String(255), nullable=False)
    summary = Column(String(1000), default="")
    order_index = Column(Integer, nullable=False)
    available = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Chapter(chapter_id={self.chapter_id}, title={self.title})>"
