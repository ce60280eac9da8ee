"""
Pydantic schemas for request bodies and public projections.

Field names follow the camelCase wire format the frontend sends.
Required-field checks live in the handlers so that a missing or empty
value is reported as ``ValidationError`` rather than a 422.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """What a client may see of a user; never carries the password hash."""

    id: str
    name: str
    email: str
    role: str


class UserSummary(BaseModel):
    id: str
    name: str


class LoginResponse(BaseModel):
    token: str
    user: UserPublic


# ═══════════════════════════════════════════════════════════════════════════════
# Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class TaskCreate(BaseModel):
    project: Optional[str] = None
    taskName: Optional[str] = None
    status: Optional[str] = None
    taskDetails: Optional[str] = None
    remark: Optional[str] = None


class TaskUpdate(BaseModel):
    taskName: Optional[str] = None
    status: Optional[str] = None
    taskDetails: Optional[str] = None
    remark: Optional[str] = None


class TaskOut(BaseModel):
    id: str
    project: Optional[str] = None
    taskName: str
    status: str
    taskDetails: str
    remark: str


# ═══════════════════════════════════════════════════════════════════════════════
# Projects
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectCreate(BaseModel):
    projectName: Optional[str] = None
    user: Optional[str] = None
    createdDate: Optional[datetime] = None
    priority: Optional[str] = None


class ProjectOut(BaseModel):
    id: str
    projectName: str
    user: Optional[UserSummary] = None
    createdDate: datetime
    priority: str
