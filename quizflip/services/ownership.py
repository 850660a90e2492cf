"""Ownership checks shared by every service, plus the category cascade.

Every owned record (Category, Flashcard, Quiz) exposes ``owner_id``. Single-record
paths load first and then call :func:`authorize`; collection reads filter by
``owner_id`` in the query instead.
"""
import logging
from typing import Protocol, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.core.errors import Internal, NotFound, Unauthorized
from quizflip.models.category import Category
from quizflip.models.flashcard import Flashcard
from quizflip.schemas.auth import Identity

logger = logging.getLogger(__name__)


class Owned(Protocol):
    owner_id: int


OwnedT = TypeVar("OwnedT")


def owns(identity: Identity, record: Owned | None) -> bool:
    return record is not None and record.owner_id == identity.user_id


def authorize(identity: Identity, record: Owned | None, label: str = "Record") -> None:
    """Raise NotFound for a missing record, Unauthorized for someone else's."""
    if record is None:
        raise NotFound(f"{label} not found")
    if not owns(identity, record):
        raise Unauthorized("Not authorized")


async def load_authorized(
    db: AsyncSession,
    model: type[OwnedT],
    record_id: int,
    identity: Identity,
    label: str,
) -> OwnedT:
    """Load by primary key and run :func:`authorize` on the result."""
    record = await db.get(model, record_id)
    authorize(identity, record, label)
    return record


async def find_owned(
    db: AsyncSession,
    model: type[OwnedT],
    record_id: int,
    identity: Identity,
) -> OwnedT | None:
    """Load by primary key within the caller's scope; someone else's record reads as missing."""
    result = await db.execute(
        select(model).where(model.id == record_id, model.owner_id == identity.user_id)
    )
    return result.scalar_one_or_none()


async def cascade_delete_category(db: AsyncSession, category: Category) -> int:
    """Delete the category and its flashcards in one transaction.

    Returns the number of flashcards removed. Quizzes tagged with the category are
    left alone. On a storage error nothing is removed, so the whole call can be retried.
    """
    category_id, owner_id = category.id, category.owner_id
    try:
        result = await db.execute(
            delete(Flashcard).where(
                Flashcard.category_id == category_id,
                Flashcard.owner_id == owner_id,
            )
        )
        await db.delete(category)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Cascade delete of category id=%s rolled back", category_id)
        raise Internal("Could not delete category") from exc

    removed = result.rowcount
    logger.info("Deleted category id=%s with %s flashcard(s)", category_id, removed)
    return removed
