"""Category model: a user's grouping for flashcards and (optionally) quizzes."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from quizflip.db.session import Base

DEFAULT_COLOR = "#3498db"
DEFAULT_ICON = "book"


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(32), nullable=False, default=DEFAULT_COLOR)
    icon = Column(String(64), nullable=False, default=DEFAULT_ICON)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
