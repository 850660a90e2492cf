"""Request dependencies: DB session and the authenticated caller."""
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from quizflip.core.errors import Unauthenticated
from quizflip.core.security import decode_access_token
from quizflip.db.session import get_db
from quizflip.schemas.auth import Identity

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Identity:
    """Verify the bearer token. No database access: the claims are the identity."""
    if credentials is None:
        raise Unauthenticated()

    identity = decode_access_token(credentials.credentials)
    if identity is None:
        raise Unauthenticated("Token is not valid")
    return identity


DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
