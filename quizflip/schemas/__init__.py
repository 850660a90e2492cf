from quizflip.schemas.auth import (
    AuthResponseSchema,
    CurrentUserSchema,
    Identity,
    LoginSchema,
    RegisterSchema,
    UserOutSchema,
)
from quizflip.schemas.category import (
    CategoryBriefSchema,
    CategoryCreateSchema,
    CategoryOutSchema,
    CategoryUpdateSchema,
)
from quizflip.schemas.common import Difficulty, MessageSchema
from quizflip.schemas.flashcard import (
    FlashcardCreateSchema,
    FlashcardOutSchema,
    FlashcardUpdateSchema,
)
from quizflip.schemas.quiz import (
    OptionSchema,
    QuestionSchema,
    QuizCreateSchema,
    QuizOutSchema,
    QuizUpdateSchema,
)

__all__ = [
    "AuthResponseSchema",
    "CurrentUserSchema",
    "CategoryBriefSchema",
    "CategoryCreateSchema",
    "CategoryOutSchema",
    "CategoryUpdateSchema",
    "Difficulty",
    "FlashcardCreateSchema",
    "FlashcardOutSchema",
    "FlashcardUpdateSchema",
    "Identity",
    "LoginSchema",
    "MessageSchema",
    "OptionSchema",
    "QuestionSchema",
    "QuizCreateSchema",
    "QuizOutSchema",
    "QuizUpdateSchema",
    "RegisterSchema",
    "UserOutSchema",
]
