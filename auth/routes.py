"""
Auth API routes — signup, login and the protected identity echo.

Route prefix: /api
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status

from auth import service
from auth.dependencies import credential_store, get_current_identity, token_issuer
from auth.store import CredentialStore
from auth.tokens import TokenClaims, TokenIssuer
from utils.schemas import LoginRequest, LoginResponse, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    req: SignupRequest,
    request: Request,
    store: CredentialStore = Depends(credential_store),
) -> Dict[str, Any]:
    """Register a new user."""
    await service.signup(req, store, rounds=request.app.state.settings.bcrypt_rounds)
    return {"msg": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    store: CredentialStore = Depends(credential_store),
    issuer: TokenIssuer = Depends(token_issuer),
) -> LoginResponse:
    """Login with email + password."""
    return await service.login(req, store, issuer)


@router.get("/protected")
async def protected(
    identity: TokenClaims = Depends(get_current_identity),
) -> Dict[str, Any]:
    return {"msg": "Access granted", "user": identity.to_dict()}
