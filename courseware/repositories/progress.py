"""
Progress queries
"""
from typing import List, Optional
from sqlalchemy import func, distinct
from sqlalchemy.orm import Session
from courseware.models import Progress


def find_progress_by_user_and_chapter_and_section(
    db: Session,
    user_id: int,
    chapter_id: str,
    section_id: str
) -> Optional[Progress]:
    """The single progress row for a (user, chapter, section) triple, or None"""
    return db.query(Progress).filter(
        Progress.user_id == user_id,
        Progress.chapter_id == chapter_id,
        Progress.section_id == section_id
    ).first()


def find_progress_by_user(db: Session, user_id: int) -> List[Progress]:
    """All progress rows of a user, grouped by chapter then section"""
    return (
        db.query(Progress)
        .filter(Progress.user_id == user_id)
        .order_by(Progress.chapter_id, Progress.section_id)
        .all()
    )


def count_distinct_completed_chapters(db: Session, user_id: int) -> int:
    """
    Number of distinct chapter ids among the user's completed sections

    Several completed sections of one chapter count once.
    """
    count = db.query(func.count(distinct(Progress.chapter_id))).filter(
        Progress.user_id == user_id,
        Progress.completed.is_(True)
    ).scalar()
    return count or 0
