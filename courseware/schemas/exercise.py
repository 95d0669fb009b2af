"""
Pydantic schemas for exercise submissions
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ExerciseSubmissionCreate(BaseModel):
    user_id: int
    chapter_id: str = Field(..., min_length=1, max_length=255)
    exercise_id: str = Field(..., min_length=1, max_length=255)
    code: Optional[str] = None


class ExerciseSubmissionResponse(BaseModel):
    id: int
    chapter_id: str
    exercise_id: str
    code: str
    passed: bool
    feedback: Optional[str] = None
    submitted_at: datetime

    class Config:
        from_attributes = True
