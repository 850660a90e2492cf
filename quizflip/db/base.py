"""SQLAlchemy declarative base and model imports for Alembic."""
from quizflip.db.session import Base

# Import all models so Alembic can see them
from quizflip.models.category import Category  # noqa: F401
from quizflip.models.flashcard import Flashcard  # noqa: F401
from quizflip.models.quiz import Quiz  # noqa: F401
from quizflip.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Category", "Flashcard", "Quiz"]
