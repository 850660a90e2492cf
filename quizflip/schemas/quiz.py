"""Pydantic schemas for quizzes and their embedded questions."""
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from quizflip.schemas.category import CategoryBriefSchema
from quizflip.schemas.common import Difficulty


class OptionSchema(BaseModel):
    text: str = Field(min_length=1)
    is_correct: bool = False


class QuestionSchema(BaseModel):
    text: str = Field(min_length=1, validation_alias=AliasChoices("text", "question"))
    options: list[OptionSchema] = Field(default_factory=list)
    difficulty: Difficulty = "medium"


class QuizCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    category_id: int | None = None
    questions: list[QuestionSchema] = Field(min_length=1)
    time_limit: int = Field(default=0, ge=0)  # seconds, 0 = no limit


class QuizUpdateSchema(BaseModel):
    """Partial update. An explicit null category_id detaches the quiz."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    category_id: int | None = None
    questions: list[QuestionSchema] | None = Field(default=None, min_length=1)
    time_limit: int | None = Field(default=None, ge=0)


class QuizOutSchema(BaseModel):
    id: int
    owner_id: int
    title: str
    description: str | None = None
    category_id: int | None = None
    # None when the quiz has no category or the category was deleted
    category: CategoryBriefSchema | None = None
    questions: list[QuestionSchema]
    time_limit: int
    created_at: datetime | None = None
