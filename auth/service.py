"""
Signup and login flows composed from the credential store, the password
hasher and the token issuer.
"""

from __future__ import annotations

import logging

from auth.models import Role, User
from auth.password import DEFAULT_ROUNDS, hash_password, verify_password
from auth.store import CredentialStore
from auth.tokens import TokenIssuer
from utils.errors import DuplicateEmail, InvalidCredentials, ValidationError
from utils.schemas import LoginRequest, LoginResponse, SignupRequest, UserPublic

logger = logging.getLogger(__name__)

SIGNUP_ROLES = {Role.USER.value, Role.ADMIN.value}


def to_public(user: User) -> UserPublic:
    return UserPublic(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
    )


async def signup(
    req: SignupRequest,
    store: CredentialStore,
    rounds: int = DEFAULT_ROUNDS,
) -> User:
    """Register a new user.  No token is issued; the client logs in next."""
    if not (req.name and req.email and req.password and req.role):
        raise ValidationError()
    if req.role not in SIGNUP_ROLES:
        raise ValidationError(f"Invalid role: {req.role}")

    if await store.find_by_email(req.email) is not None:
        raise DuplicateEmail()

    user = await store.create(
        name=req.name,
        email=req.email,
        password_hash=hash_password(req.password, rounds=rounds),
        role=req.role,
    )
    logger.info("Registered user %s (%s)", user.name, user.id)
    return user


async def login(
    req: LoginRequest,
    store: CredentialStore,
    issuer: TokenIssuer,
) -> LoginResponse:
    """Check credentials and issue a token with the public user projection."""
    if not (req.email and req.password):
        raise ValidationError()

    user = await store.find_by_email(req.email)
    if user is None or not verify_password(req.password, user.password_hash):
        raise InvalidCredentials()

    token = issuer.issue(str(user.id), user.role)
    logger.info("Login: %s (%s)", user.name, user.id)
    return LoginResponse(token=token, user=to_public(user))
