"""Auth routes: register, login, current user. Stateless bearer-token auth."""
from fastapi import APIRouter

from quizflip.core.deps import CurrentIdentity, DbSession
from quizflip.schemas.auth import (
    AuthResponseSchema,
    CurrentUserSchema,
    LoginSchema,
    RegisterSchema,
    UserOutSchema,
)
from quizflip.services import accounts

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/users", response_model=AuthResponseSchema)
async def register(body: RegisterSchema, db: DbSession):
    """Register a user and return a token for it."""
    user, token = await accounts.register(db, body)
    return AuthResponseSchema(token=token, user=UserOutSchema.model_validate(user))


@router.post("/auth", response_model=AuthResponseSchema)
async def login(body: LoginSchema, db: DbSession):
    """Authenticate by email or username and return a token."""
    user, token = await accounts.login(db, body.identifier, body.password)
    return AuthResponseSchema(token=token, user=UserOutSchema.model_validate(user))


@router.get("/auth", response_model=CurrentUserSchema)
async def get_logged_in_user(identity: CurrentIdentity, db: DbSession):
    user = await accounts.current_user(db, identity)
    return CurrentUserSchema(user=UserOutSchema.model_validate(user))
