"""Quiz routes."""
from fastapi import APIRouter

from quizflip.core.deps import CurrentIdentity, DbSession
from quizflip.schemas.common import MessageSchema
from quizflip.schemas.quiz import QuizCreateSchema, QuizOutSchema, QuizUpdateSchema
from quizflip.services import quizzes as quiz_service

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.get("", response_model=list[QuizOutSchema])
async def list_quizzes(identity: CurrentIdentity, db: DbSession):
    """All of the caller's quizzes with category name/color/icon filled in."""
    return await quiz_service.list_quizzes(db, identity)


@router.get("/category/{category_id}", response_model=list[QuizOutSchema])
async def list_quizzes_by_category(category_id: int, identity: CurrentIdentity, db: DbSession):
    return await quiz_service.list_quizzes_by_category(db, identity, category_id)


@router.get("/{quiz_id}", response_model=QuizOutSchema)
async def get_quiz(quiz_id: int, identity: CurrentIdentity, db: DbSession):
    return await quiz_service.get_quiz(db, identity, quiz_id)


@router.post("", response_model=QuizOutSchema)
async def create_quiz(body: QuizCreateSchema, identity: CurrentIdentity, db: DbSession):
    return await quiz_service.create_quiz(db, identity, body)


@router.put("/{quiz_id}", response_model=QuizOutSchema)
async def update_quiz(
    quiz_id: int,
    body: QuizUpdateSchema,
    identity: CurrentIdentity,
    db: DbSession,
):
    return await quiz_service.update_quiz(db, identity, quiz_id, body)


@router.delete("/{quiz_id}", response_model=MessageSchema)
async def delete_quiz(quiz_id: int, identity: CurrentIdentity, db: DbSession):
    await quiz_service.delete_quiz(db, identity, quiz_id)
    return MessageSchema(message="Quiz removed")
