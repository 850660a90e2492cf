"""Flashcard routes."""
from fastapi import APIRouter

from quizflip.core.deps import CurrentIdentity, DbSession
from quizflip.schemas.common import MessageSchema
from quizflip.schemas.flashcard import (
    FlashcardCreateSchema,
    FlashcardOutSchema,
    FlashcardUpdateSchema,
)
from quizflip.services import flashcards as flashcard_service

router = APIRouter(prefix="/api/flashcards", tags=["flashcards"])


@router.get("", response_model=list[FlashcardOutSchema])
async def list_flashcards(identity: CurrentIdentity, db: DbSession):
    return await flashcard_service.list_flashcards(db, identity)


@router.get("/category/{category_id}", response_model=list[FlashcardOutSchema])
async def list_flashcards_by_category(category_id: int, identity: CurrentIdentity, db: DbSession):
    """Flashcards of one category; the category must belong to the caller."""
    return await flashcard_service.list_flashcards_by_category(db, identity, category_id)


@router.post("", response_model=FlashcardOutSchema)
async def create_flashcard(body: FlashcardCreateSchema, identity: CurrentIdentity, db: DbSession):
    return await flashcard_service.create_flashcard(db, identity, body)


@router.put("/{flashcard_id}", response_model=FlashcardOutSchema)
async def update_flashcard(
    flashcard_id: int,
    body: FlashcardUpdateSchema,
    identity: CurrentIdentity,
    db: DbSession,
):
    return await flashcard_service.update_flashcard(db, identity, flashcard_id, body)


@router.delete("/{flashcard_id}", response_model=MessageSchema)
async def delete_flashcard(flashcard_id: int, identity: CurrentIdentity, db: DbSession):
    await flashcard_service.delete_flashcard(db, identity, flashcard_id)
    return MessageSchema(message="Flashcard removed")
