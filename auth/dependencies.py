"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``credential_store`` and the token gate
``get_current_identity`` used in front of protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.store import CredentialStore
from auth.tokens import TokenClaims, TokenIssuer
from database.session import get_db_session
from utils.errors import MissingToken


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def credential_store(session: AsyncSession = Depends(db_session)) -> CredentialStore:
    return CredentialStore(session)


def token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def authenticate(authorization: Optional[str], issuer: TokenIssuer) -> TokenClaims:
    """
    Gate for protected routes: return the verified claims or raise.

    The header carries the raw token with no ``Bearer`` prefix.
    ``MissingToken`` when it is absent, ``InvalidToken`` when it fails
    verification.
    """
    token = (authorization or "").strip()
    if not token:
        raise MissingToken()
    return issuer.verify(token)


async def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    issuer: TokenIssuer = Depends(token_issuer),
) -> TokenClaims:
    """
    Verify the ``Authorization`` token and attach the claims to
    ``request.state.identity``.
    """
    claims = authenticate(authorization, issuer)
    request.state.identity = claims
    return claims
