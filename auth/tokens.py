"""
Signed bearer-token creation and verification.

Tokens are HS256 JWTs carrying the user ``id``, ``role``, ``iat`` and
``exp`` claims.  The secret is handed in by ``main.create_app`` from
``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

import jwt

from utils.errors import ConfigurationError, InvalidToken

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_EXPIRY_SECONDS = 3600


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    role: str
    issued_at: int
    expires_at: int

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "role": self.role,
            "iat": self.issued_at,
            "exp": self.expires_at,
        }


class TokenIssuer:
    """Issues and verifies tokens with one process-wide symmetric secret."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = DEFAULT_EXPIRY_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._expiry_seconds = expiry_seconds
        self._clock = clock

    def issue(self, subject_id: str, role: str) -> str:
        """Create a signed token for ``subject_id`` expiring after the configured TTL."""
        now = int(self._clock())
        payload = {
            "id": str(subject_id),
            "role": role,
            "iat": now,
            "exp": now + self._expiry_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the decoded claims.

        Expiry is checked against the issuer's clock, so a token issued at
        T stops verifying at T + TTL.  Raises ``InvalidToken`` for every
        failure; the cause is only logged.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={
                    "require": ["id", "exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (jwt.PyJWTError, ValueError, TypeError) as exc:
            logger.debug("Token rejected: %s", exc)
            raise InvalidToken() from exc

        if expires_at <= self._clock():
            logger.debug("Token rejected: expired at %s", expires_at)
            raise InvalidToken()

        role = payload.get("role")
        if not isinstance(role, str):
            logger.debug("Token rejected: missing role claim")
            raise InvalidToken()

        return TokenClaims(
            user_id=str(payload["id"]),
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
        )
