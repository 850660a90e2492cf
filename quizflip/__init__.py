"""QuizFlip: personal categories, flashcards and quizzes."""

__version__ = "0.1.0"
