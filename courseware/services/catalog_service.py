"""
Content catalog synchronization service

Reconciles on-disk chapter directories with persisted chapter rows.

Directory contract:
    <content_root>/<NN-slug>/metadata.json   (optional: {"title", "summary"})

Every matching directory is upserted by its name; nothing is ever deleted.
A failure in one directory is logged and recorded in the report, and the
scan moves on to the next directory.
"""
import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from courseware.exceptions import NotFoundError
from courseware.models import Chapter
from courseware.repositories import chapters as chapter_repository

logger = logging.getLogger(__name__)

# ASCII digits only: "١٢-intro" must not slip through as an order index
CHAPTER_DIR_PATTERN = re.compile(r"(\d+)-(.+)", re.ASCII)

METADATA_FILENAME = "metadata.json"

# order_index is a 32-bit INTEGER column
MAX_ORDER_INDEX = 2**31 - 1


@dataclass
class SyncError:
    """A directory that could not be loaded"""
    directory: str
    message: str


@dataclass
class SyncReport:
    """Outcome of one synchronization run"""
    loaded: int = 0
    errors: List[SyncError] = field(default_factory=list)
    chapter_ids: List[str] = field(default_factory=list)


def title_from_slug(slug: str) -> str:
    """
    Derive a display title from a directory slug

    "getting-started" -> "Getting Started"; empty tokens are dropped, and a
    slug with no usable tokens is returned unchanged.
    """
    words = [token[0].upper() + token[1:] for token in slug.split("-") if token]
    return " ".join(words) if words else slug


def parse_order_index(digits: str) -> int:
    """Parse the numeric directory prefix, rejecting values the column cannot hold"""
    order_index = int(digits)
    if order_index > MAX_ORDER_INDEX:
        raise ValueError(f"Order index {digits} exceeds {MAX_ORDER_INDEX}")
    return order_index


class CatalogService:
    """Service for synchronizing and reading the chapter catalog"""

    def sync(self, db: Session, root_path: Union[str, Path]) -> SyncReport:
        """
        Synchronize chapters from the content root

        Args:
            db: Database session
            root_path: Directory holding one sub-directory per chapter

        Returns:
            SyncReport with the number of chapters loaded and per-directory errors
        """
        root = Path(root_path).expanduser().resolve()
        report = SyncReport()

        logger.info(f"Loading chapters from filesystem: {root}")

        if not root.is_dir():
            logger.error(f"Chapters directory does not exist: {root}")
            report.errors.append(SyncError(str(root), "Content root does not exist or is not a directory"))
            return report

        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.error(f"Error reading chapters directory {root}: {str(e)}", exc_info=True)
            report.errors.append(SyncError(str(root), str(e)))
            return report

        for entry in entries:
            if not entry.is_dir():
                continue

            match = CHAPTER_DIR_PATTERN.fullmatch(entry.name)
            if not match:
                logger.debug(f"Ignoring non-chapter directory: {entry.name}")
                continue

            try:
                chapter = self._upsert_chapter(db, entry, match.group(1), match.group(2))
                db.commit()
            except Exception as e:
                db.rollback()
                logger.error(f"Error loading chapter from directory: {entry.name}", exc_info=True)
                report.errors.append(SyncError(entry.name, str(e)))
                continue

            report.loaded += 1
            report.chapter_ids.append(chapter.chapter_id)
            logger.info(f"Loaded chapter: {chapter.chapter_id} - {chapter.title}")

        logger.info(
            f"Successfully loaded {report.loaded} chapters"
            f" ({len(report.errors)} directories skipped)"
        )

        return report

    def _upsert_chapter(self, db: Session, directory: Path, digits: str, slug: str) -> Chapter:
        """Insert or update the chapter row for one directory"""
        chapter_id = directory.name
        order_index = parse_order_index(digits)
        title, summary = self._read_metadata(directory / METADATA_FILENAME, chapter_id, slug)

        chapter = chapter_repository.find_chapter_by_chapter_id(db, chapter_id)
        if chapter:
            chapter.title = title
            chapter.summary = summary
            chapter.order_index = order_index
            chapter.available = True
        else:
            chapter = Chapter(
                chapter_id=chapter_id,
                title=title,
                summary=summary,
                order_index=order_index,
                available=True
            )
            db.add(chapter)

        db.flush()
        return chapter

    def _read_metadata(self, metadata_file: Path, chapter_id: str, slug: str) -> Tuple[str, str]:
        """
        Read (title, summary) from metadata.json

        A missing or unreadable file, or one that is not a JSON object, falls
        back to a slug-derived title and an empty summary.
        """
        default_title = title_from_slug(slug)

        if not metadata_file.is_file():
            return default_title, ""

        try:
            data = json.loads(metadata_file.read_text(encoding="utf-8-sig"))
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading metadata file for {chapter_id}, using defaults: {str(e)}")
            return default_title, ""

        if not isinstance(data, dict):
            logger.warning(f"Metadata for {chapter_id} is not a JSON object, using defaults")
            return default_title, ""

        title = self._text_field(data, "title")
        summary = self._text_field(data, "summary")

        return (title if title is not None else default_title), (summary or "")

    @staticmethod
    def _text_field(data: dict, key: str) -> Optional[str]:
        value = data.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def list_chapters(self, db: Session) -> List[Chapter]:
        """All chapters ordered by order_index"""
        return chapter_repository.find_all_chapters_ordered(db)

    def list_available_chapters(self, db: Session) -> List[Chapter]:
        """Available chapters ordered by order_index"""
        return chapter_repository.find_available_chapters_ordered(db)

    def get_chapter(self, db: Session, chapter_id: str) -> Chapter:
        """
        Get a chapter by its stable id

        Raises:
            NotFoundError: if the chapter is not in the catalog
        """
        chapter = chapter_repository.find_chapter_by_chapter_id(db, chapter_id)
        if not chapter:
            raise NotFoundError(f"Chapter not found: {chapter_id}")
        return chapter


# Global instance
catalog_service = CatalogService()
