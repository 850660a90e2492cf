"""Category routes."""
from fastapi import APIRouter

from quizflip.core.deps import CurrentIdentity, DbSession
from quizflip.schemas.category import (
    CategoryCreateSchema,
    CategoryOutSchema,
    CategoryUpdateSchema,
)
from quizflip.schemas.common import MessageSchema
from quizflip.services import categories as category_service

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOutSchema])
async def list_categories(identity: CurrentIdentity, db: DbSession):
    """All of the caller's categories, newest first."""
    return await category_service.list_categories(db, identity)


@router.post("", response_model=CategoryOutSchema)
async def create_category(body: CategoryCreateSchema, identity: CurrentIdentity, db: DbSession):
    return await category_service.create_category(db, identity, body)


@router.put("/{category_id}", response_model=CategoryOutSchema)
async def update_category(
    category_id: int,
    body: CategoryUpdateSchema,
    identity: CurrentIdentity,
    db: DbSession,
):
    """Partial update: omitted fields are left as they are."""
    return await category_service.update_category(db, identity, category_id, body)


@router.delete("/{category_id}", response_model=MessageSchema)
async def delete_category(category_id: int, identity: CurrentIdentity, db: DbSession):
    """Delete the category together with all of its flashcards."""
    removed = await category_service.delete_category(db, identity, category_id)
    return MessageSchema(
        message=f"Category and {removed} associated flashcard(s) removed",
    )
