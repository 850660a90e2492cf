"""Category operations, scoped to the calling user."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.models.category import DEFAULT_COLOR, DEFAULT_ICON, Category
from quizflip.schemas.auth import Identity
from quizflip.schemas.category import CategoryCreateSchema, CategoryUpdateSchema
from quizflip.services.ownership import cascade_delete_category, load_authorized

# Fields that may be cleared by sending null / "" explicitly
CLEARABLE_FIELDS = {"description"}


async def list_categories(db: AsyncSession, identity: Identity) -> list[Category]:
    result = await db.execute(
        select(Category)
        .where(Category.owner_id == identity.user_id)
        .order_by(Category.created_at.desc(), Category.id.desc())
    )
    return list(result.scalars().all())


async def create_category(
    db: AsyncSession, identity: Identity, data: CategoryCreateSchema
) -> Category:
    category = Category(
        owner_id=identity.user_id,
        name=data.name,
        description=data.description,
        color=data.color or DEFAULT_COLOR,
        icon=data.icon or DEFAULT_ICON,
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)
    return category


async def update_category(
    db: AsyncSession, identity: Identity, category_id: int, data: CategoryUpdateSchema
) -> Category:
    category = await load_authorized(db, Category, category_id, identity, "Category")

    fields = data.model_dump(exclude_unset=True)
    for key, value in fields.items():
        if value is None and key not in CLEARABLE_FIELDS:
            continue
        setattr(category, key, value)

    await db.commit()
    await db.refresh(category)
    return category


async def delete_category(db: AsyncSession, identity: Identity, category_id: int) -> int:
    """Delete an owned category and its flashcards; returns the flashcard count."""
    category = await load_authorized(db, Category, category_id, identity, "Category")
    return await cascade_delete_category(db, category)
