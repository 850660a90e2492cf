"""User model: login identity that owns categories, flashcards and quizzes."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from quizflip.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
