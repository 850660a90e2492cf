"""Password hashing and bearer-token signing (JWT)."""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from quizflip.core.config import get_settings
from quizflip.schemas.auth import Identity

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_hash_rounds,
)

TOKEN_TYPE = "access"


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def burn_password_check() -> None:
    """Spend the same time as a real verify when there is no user to check against."""
    pwd_context.dummy_verify()


def create_access_token(identity: Identity, expires_delta: timedelta | None = None) -> str:
    """Sign a token carrying the caller's id and username."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(identity.user_id),
        "username": identity.username,
        "iat": now,
        "exp": now + expires_delta,
        "type": TOKEN_TYPE,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Identity | None:
    """Verify signature and expiry; return the identity or None."""
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    if claims.get("type") != TOKEN_TYPE:
        return None
    try:
        return Identity(user_id=int(claims["sub"]), username=claims["username"])
    except (KeyError, TypeError, ValueError):
        return None
