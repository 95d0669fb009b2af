"""
Pydantic schemas for section progress
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProgressUpdate(BaseModel):
    """Schema for updating section progress"""
    user_id: int
    chapter_id: str = Field(..., min_length=1, max_length=255)
    section_id: str = Field(..., min_length=1, max_length=255)
    completed: bool


class ProgressResponse(BaseModel):
    chapter_id: str
    section_id: str
    completed: bool
    last_accessed_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProgressStats(BaseModel):
    completed_chapters: int
