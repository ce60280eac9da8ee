"""
Salted one-way password storage.

``hash_password`` produces a bcrypt string at cost factor 10 with a new
random salt embedded, so two hashes of the same password never match
textually.  bcrypt only reads the first 72 bytes of its input; longer
passwords are cut to that length on both hash and verify so they are
accepted rather than rejected by the library.
"""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


def _secret_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_secret_bytes(password), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """True when ``password`` matches ``password_hash``; a malformed hash is a mismatch."""
    try:
        return bcrypt.checkpw(_secret_bytes(password), password_hash.encode("ascii"))
    except (ValueError, TypeError, UnicodeEncodeError):
        return False
