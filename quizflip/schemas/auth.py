"""Pydantic schemas for identity, registration and login."""
import re
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Простая, практичная проверка email
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Identity(BaseModel):
    """Authenticated caller, taken from verified token claims."""

    user_id: int
    username: str

    class Config:
        frozen = True


class RegisterSchema(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(max_length=255)
    password: str = Field(min_length=6)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please add username")
        return v

    @field_validator("email")
    @classmethod
    def email_well_formed(cls, v: str) -> str:
        v = v.strip().lower()
        if not EMAIL_RE.match(v):
            raise ValueError("Please include a valid email")
        return v


class LoginSchema(BaseModel):
    # "email" is what older clients send; it may hold a username as well
    identifier: str = Field(min_length=1, validation_alias=AliasChoices("identifier", "email"))
    password: str


class UserOutSchema(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class AuthResponseSchema(BaseModel):
    success: bool = True
    token: str
    user: UserOutSchema


class CurrentUserSchema(BaseModel):
    success: bool = True
    user: UserOutSchema
