"""Quiz operations. Quizzes are leaves: deleting one touches nothing else."""
import json
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.core.errors import Unauthorized
from quizflip.models.category import Category
from quizflip.models.quiz import Quiz
from quizflip.schemas.auth import Identity
from quizflip.schemas.category import CategoryBriefSchema
from quizflip.schemas.quiz import (
    QuestionSchema,
    QuizCreateSchema,
    QuizOutSchema,
    QuizUpdateSchema,
)
from quizflip.services.ownership import load_authorized, owns

logger = logging.getLogger(__name__)


def _dump_questions(questions: list[QuestionSchema]) -> str:
    return json.dumps([q.model_dump() for q in questions])


def _load_questions(questions_json: str) -> list[QuestionSchema]:
    return [QuestionSchema(**q) for q in json.loads(questions_json)]


def to_schema(quiz: Quiz, category: Category | None) -> QuizOutSchema:
    return QuizOutSchema(
        id=quiz.id,
        owner_id=quiz.owner_id,
        title=quiz.title,
        description=quiz.description,
        category_id=quiz.category_id,
        category=CategoryBriefSchema.model_validate(category) if category else None,
        questions=_load_questions(quiz.questions_json),
        time_limit=quiz.time_limit,
        created_at=quiz.created_at,
    )


async def _verify_category(db: AsyncSession, identity: Identity, category_id: int) -> Category:
    # missing and foreign categories both read as "invalid" here, unlike flashcards
    category = await db.get(Category, category_id)
    if not owns(identity, category):
        raise Unauthorized("Invalid category")
    return category


async def _with_categories(
    db: AsyncSession, identity: Identity, quizzes: list[Quiz]
) -> list[QuizOutSchema]:
    """Resolve category display fields; deleted categories resolve to None."""
    ids = {q.category_id for q in quizzes if q.category_id is not None}
    by_id: dict[int, Category] = {}
    if ids:
        result = await db.execute(
            select(Category).where(Category.id.in_(ids), Category.owner_id == identity.user_id)
        )
        by_id = {c.id: c for c in result.scalars().all()}
    return [to_schema(q, by_id.get(q.category_id)) for q in quizzes]


async def list_quizzes(db: AsyncSession, identity: Identity) -> list[QuizOutSchema]:
    result = await db.execute(
        select(Quiz)
        .where(Quiz.owner_id == identity.user_id)
        .order_by(Quiz.created_at.desc(), Quiz.id.desc())
    )
    return await _with_categories(db, identity, list(result.scalars().all()))


async def get_quiz(db: AsyncSession, identity: Identity, quiz_id: int) -> QuizOutSchema:
    quiz = await load_authorized(db, Quiz, quiz_id, identity, "Quiz")
    return (await _with_categories(db, identity, [quiz]))[0]


async def list_quizzes_by_category(
    db: AsyncSession, identity: Identity, category_id: int
) -> list[QuizOutSchema]:
    category = await load_authorized(db, Category, category_id, identity, "Category")
    result = await db.execute(
        select(Quiz)
        .where(Quiz.owner_id == identity.user_id, Quiz.category_id == category_id)
        .order_by(Quiz.created_at.desc(), Quiz.id.desc())
    )
    return [to_schema(q, category) for q in result.scalars().all()]


async def create_quiz(db: AsyncSession, identity: Identity, data: QuizCreateSchema) -> QuizOutSchema:
    category = None
    if data.category_id is not None:
        category = await _verify_category(db, identity, data.category_id)

    quiz = Quiz(
        owner_id=identity.user_id,
        category_id=data.category_id,
        title=data.title,
        description=data.description,
        questions_json=_dump_questions(data.questions),
        time_limit=data.time_limit,
    )
    db.add(quiz)
    await db.commit()
    await db.refresh(quiz)
    return to_schema(quiz, category)


async def update_quiz(
    db: AsyncSession, identity: Identity, quiz_id: int, data: QuizUpdateSchema
) -> QuizOutSchema:
    quiz = await load_authorized(db, Quiz, quiz_id, identity, "Quiz")
    fields = data.model_dump(exclude_unset=True)

    if "category_id" in fields:
        new_category_id = fields["category_id"]
        if new_category_id is not None and new_category_id != quiz.category_id:
            await _verify_category(db, identity, new_category_id)
        quiz.category_id = new_category_id

    if "description" in fields:
        quiz.description = fields["description"]
    if data.title is not None:
        quiz.title = data.title
    if data.questions is not None:
        quiz.questions_json = _dump_questions(data.questions)
    if data.time_limit is not None:
        quiz.time_limit = data.time_limit

    await db.commit()
    await db.refresh(quiz)
    return (await _with_categories(db, identity, [quiz]))[0]


async def delete_quiz(db: AsyncSession, identity: Identity, quiz_id: int) -> None:
    quiz = await load_authorized(db, Quiz, quiz_id, identity, "Quiz")
    await db.delete(quiz)
    await db.commit()
    logger.info("Deleted quiz id=%s", quiz_id)
