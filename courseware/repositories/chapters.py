"""
Chapter queries
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from courseware.models import Chapter


def find_chapter_by_chapter_id(db: Session, chapter_id: str) -> Optional[Chapter]:
    """Chapter whose stable id (source directory name) matches, or None"""
    return db.query(Chapter).filter(Chapter.chapter_id == chapter_id).first()


def find_all_chapters_ordered(db: Session) -> List[Chapter]:
    """All chapters by ascending order_index"""
    return db.query(Chapter).order_by(Chapter.order_index, Chapter.chapter_id).all()


def find_available_chapters_ordered(db: Session) -> List[Chapter]:
    """Chapters flagged available, by ascending order_index"""
    return (
        db.query(Chapter)
        .filter(Chapter.available.is_(True))
        .order_by(Chapter.order_index, Chapter.chapter_id)
        .all()
    )
