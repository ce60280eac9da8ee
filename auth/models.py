"""This module re-exports the user model and role enum from the database package for use in authentication-related code.
"""

from database.models import Role, User  # noqa: F401

__all__ = ["Role", "User"]
