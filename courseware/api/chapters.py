"""
Chapter catalog API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import logging

from courseware.config import settings
from courseware.database import get_db
from courseware.schemas.chapter import ChapterResponse, CatalogReloadResponse, SyncErrorResponse
from courseware.services.catalog_service import catalog_service

router = APIRouter(prefix="/api/chapters", tags=["chapters"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ChapterResponse])
async def list_chapters(db: Session = Depends(get_db)):
    """Get all available chapters ordered by index"""
    return catalog_service.list_available_chapters(db)


@router.get("/{chapter_id}", response_model=ChapterResponse)
async def get_chapter(chapter_id: str, db: Session = Depends(get_db)):
    """Get a specific chapter by its stable id"""
    return catalog_service.get_chapter(db, chapter_id)


@router.post("/reload", response_model=CatalogReloadResponse)
async def reload_chapters(db: Session = Depends(get_db)):
    """
    Re-synchronize chapters from the content directory (admin endpoint)

    Directories that fail to load are reported but never abort the reload.
    """
    logger.info("Catalog reload requested")

    report = catalog_service.sync(db, settings.CONTENT_PATH)

    return CatalogReloadResponse(
        message="Chapters reloaded successfully",
        loaded=report.loaded,
        errors=[SyncErrorResponse(directory=e.directory, message=e.message) for e in report.errors],
        chapter_ids=report.chapter_ids
    )
