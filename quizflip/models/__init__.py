from quizflip.models.user import User
from quizflip.models.category import Category
from quizflip.models.flashcard import Flashcard
from quizflip.models.quiz import Quiz

__all__ = ["User", "Category", "Flashcard", "Quiz"]
