"""
Pydantic schemas for the chapter catalog
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class ChapterResponse(BaseModel):
    """A catalog chapter"""
    chapter_id: str
    title: str
    summary: Optional[str] = ""
    order_index: int
    available: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SyncErrorResponse(BaseModel):
    directory: str
    message: str


class CatalogReloadResponse(BaseModel):
    """Result of a catalog reload"""
    message: str
    loaded: int
    errors: List[SyncErrorResponse]
    chapter_ids: List[str] = []
