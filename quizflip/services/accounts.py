"""Registration, login and the current-user lookup."""
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.core.errors import Conflict, InvalidCredentials, NotFound, ValidationFailed
from quizflip.core.security import (
    burn_password_check,
    create_access_token,
    hash_password,
    verify_password,
)
from quizflip.models.user import User
from quizflip.schemas.auth import Identity, RegisterSchema

logger = logging.getLogger(__name__)

# bcrypt hard limit
MAX_PASSWORD_BYTES = 72


def issue_token(user: User) -> str:
    return create_access_token(Identity(user_id=user.id, username=user.username))


def _check_registration(data: RegisterSchema) -> None:
    errors = []
    # Emails always contain "@", so keeping it out of usernames means a login
    # identifier can never match one user's email and another user's username.
    if "@" in data.username:
        errors.append({"field": "username", "message": "Username may not contain '@'"})
    if len(data.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors.append({"field": "password", "message": "Password is too long"})
    if errors:
        raise ValidationFailed(errors)


async def register(db: AsyncSession, data: RegisterSchema) -> tuple[User, str]:
    """Create a user; email collisions are reported before username collisions."""
    _check_registration(data)

    result = await db.execute(
        select(User).where(or_(User.email == data.email, User.username == data.username))
    )
    existing = result.scalars().all()
    if any(u.email == data.email for u in existing):
        raise Conflict("Email already in use")
    if existing:
        raise Conflict("Username already taken")

    user = User(
        username=data.username,
        email=data.email,
        hashed_password=hash_password(data.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        # lost a race with a concurrent registration
        await db.rollback()
        raise Conflict("Email or username already in use") from exc
    await db.refresh(user)

    logger.info("Registered user id=%s", user.id)
    return user, issue_token(user)


async def login(db: AsyncSession, identifier: str, password: str) -> tuple[User, str]:
    """Authenticate by email or username. Every failure looks the same to the caller."""
    identifier = identifier.strip()
    result = await db.execute(
        select(User).where(or_(User.email == identifier.lower(), User.username == identifier))
    )
    user = result.scalars().first()

    if user is None:
        burn_password_check()
        logger.warning("Failed login: unknown identifier")
        raise InvalidCredentials()

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        # bcrypt would reject it; still spend the same time as a real check
        burn_password_check()
        logger.warning("Failed login for user id=%s", user.id)
        raise InvalidCredentials()

    if not verify_password(password, user.hashed_password):
        logger.warning("Failed login for user id=%s", user.id)
        raise InvalidCredentials()

    return user, issue_token(user)


async def current_user(db: AsyncSession, identity: Identity) -> User:
    user = await db.get(User, identity.user_id)
    if user is None:
        raise NotFound("User not found")
    return user
