from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.core.errors import InvalidToken, Unauthenticated, ValidationError
from tenderhub.core.logging_config import logger
from tenderhub.core.security import decode_access_token
from tenderhub.crud.users import get_user_by_id
from tenderhub.db.database import get_db

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthSession:
    """Identity resolved for the current request."""

    account_id: UUID
    email: str
    role: str
    company_id: Optional[UUID] = None


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> AuthSession:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials)
    try:
        account_id = UUID(payload["sub"])
    except ValueError:
        raise InvalidToken()

    # the company link is re-read so a stale token never grants ownership
    user = await get_user_by_id(db, account_id)
    if not user:
        logger.warning(f"Token for unknown account {account_id}")
        raise InvalidToken()

    return AuthSession(
        account_id=user.id,
        email=user.email,
        role=user.role,
        company_id=user.company.id if user.company else None,
    )


async def require_company(session: AuthSession = Depends(get_current_session)) -> AuthSession:
    if session.company_id is None:
        raise ValidationError("No company associated with user")
    return session
