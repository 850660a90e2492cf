"""Pydantic schemas for flashcards."""
from datetime import datetime

from pydantic import BaseModel, Field

from quizflip.schemas.common import Difficulty


class FlashcardCreateSchema(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    category_id: int
    difficulty: Difficulty = "medium"


class FlashcardUpdateSchema(BaseModel):
    question: str | None = Field(default=None, min_length=1)
    answer: str | None = Field(default=None, min_length=1)


class FlashcardOutSchema(BaseModel):
    id: int
    owner_id: int
    category_id: int
    question: str
    answer: str
    difficulty: Difficulty
    last_reviewed: datetime | None = None
    next_review: datetime | None = None
    review_count: int = 0
    mastered: bool = False
    created_at: datetime | None = None

    class Config:
        from_attributes = True
