"""Quiz model: ordered multiple-choice questions, optionally tagged with a category."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from quizflip.db.session import Base

# SQLite doesn't have native JSON; questions are stored as a JSON string:
# [{text, difficulty, options: [{text, is_correct}]}]


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # No FK: deleting a category leaves its quizzes in place
    category_id = Column(Integer, nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    questions_json = Column(Text, nullable=False)
    time_limit = Column(Integer, nullable=False, default=0)  # seconds, 0 = no limit
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
