"""Pydantic schemas for categories."""
from datetime import datetime

from pydantic import BaseModel, Field


class CategoryCreateSchema(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    color: str | None = Field(default=None, max_length=32)
    icon: str | None = Field(default=None, max_length=64)


class CategoryUpdateSchema(BaseModel):
    """Partial update: only fields present in the request body are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    color: str | None = Field(default=None, min_length=1, max_length=32)
    icon: str | None = Field(default=None, min_length=1, max_length=64)


class CategoryOutSchema(BaseModel):
    id: int
    owner_id: int
    name: str
    description: str | None = None
    color: str
    icon: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CategoryBriefSchema(BaseModel):
    """Display fields of a category embedded in other records."""

    id: int
    name: str
    color: str
    icon: str

    class Config:
        from_attributes = True
