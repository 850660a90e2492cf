"""Flashcard operations. A flashcard always lives in one of its owner's categories."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.core.errors import NotFound
from quizflip.models.category import Category
from quizflip.models.flashcard import Flashcard
from quizflip.schemas.auth import Identity
from quizflip.schemas.flashcard import FlashcardCreateSchema, FlashcardUpdateSchema
from quizflip.services.ownership import find_owned, load_authorized

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found or not authorized"


async def _owned_category(db: AsyncSession, identity: Identity, category_id: int) -> Category:
    # someone else's category is reported exactly like a missing one
    category = await find_owned(db, Category, category_id, identity)
    if category is None:
        raise NotFound(CATEGORY_NOT_FOUND)
    return category


async def list_flashcards(db: AsyncSession, identity: Identity) -> list[Flashcard]:
    result = await db.execute(
        select(Flashcard)
        .where(Flashcard.owner_id == identity.user_id)
        .order_by(Flashcard.created_at.desc(), Flashcard.id.desc())
    )
    return list(result.scalars().all())


async def list_flashcards_by_category(
    db: AsyncSession, identity: Identity, category_id: int
) -> list[Flashcard]:
    await _owned_category(db, identity, category_id)
    result = await db.execute(
        select(Flashcard)
        .where(
            Flashcard.category_id == category_id,
            Flashcard.owner_id == identity.user_id,
        )
        .order_by(Flashcard.created_at.desc(), Flashcard.id.desc())
    )
    return list(result.scalars().all())


async def create_flashcard(
    db: AsyncSession, identity: Identity, data: FlashcardCreateSchema
) -> Flashcard:
    category = await _owned_category(db, identity, data.category_id)

    flashcard = Flashcard(
        owner_id=identity.user_id,
        category_id=category.id,
        question=data.question,
        answer=data.answer,
        difficulty=data.difficulty,
    )
    db.add(flashcard)
    try:
        await db.commit()
    except IntegrityError as exc:
        # the category was deleted between the check and the insert
        await db.rollback()
        logger.warning("Flashcard create lost its category id=%s", data.category_id)
        raise NotFound(CATEGORY_NOT_FOUND) from exc
    await db.refresh(flashcard)
    return flashcard


async def update_flashcard(
    db: AsyncSession, identity: Identity, flashcard_id: int, data: FlashcardUpdateSchema
) -> Flashcard:
    """Only question and answer can change; the category is fixed at creation."""
    flashcard = await load_authorized(db, Flashcard, flashcard_id, identity, "Flashcard")

    if data.question is not None:
        flashcard.question = data.question
    if data.answer is not None:
        flashcard.answer = data.answer

    await db.commit()
    await db.refresh(flashcard)
    return flashcard


async def delete_flashcard(db: AsyncSession, identity: Identity, flashcard_id: int) -> None:
    flashcard = await load_authorized(db, Flashcard, flashcard_id, identity, "Flashcard")
    await db.delete(flashcard)
    await db.commit()
    logger.info("Deleted flashcard id=%s", flashcard_id)
