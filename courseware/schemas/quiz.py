"""
Pydantic schemas for quiz results
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class QuizSubmission(BaseModel):
    """
    Schema for quiz submission

    Range checks on the counts are done by the service so that a zero
    question count surfaces as invalid_argument rather than a schema error.
    """
    user_id: int
    chapter_id: str = Field(..., min_length=1, max_length=255)
    total_questions: int
    correct_answers: int
    answers: Optional[str] = None  # opaque, stored as-is


class QuizResultResponse(BaseModel):
    id: int
    chapter_id: str
    total_questions: int
    correct_answers: int
    score: int
    completed_at: datetime
    answers: Optional[str] = None

    class Config:
        from_attributes = True
