"""
SQLAlchemy ORM models for users, projects and tasks.
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class Role(str, enum.Enum):
    UNASSIGNED = ""
    USER = "user"
    ADMIN = "admin"


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default=Role.UNASSIGNED.value)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    projects = relationship("Project", back_populates="user")


class Project(Base):
    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_name = Column(String(255), nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    created_date = Column(DateTime(timezone=True), nullable=False)
    priority = Column(String(8), nullable=False)

    user = relationship("User", back_populates="projects")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project = Column(String(64), index=True)
    task_name = Column(String(255), nullable=False)
    status = Column(String(64), nullable=False)
    task_details = Column(Text, nullable=False)
    remark = Column(Text, nullable=False)
