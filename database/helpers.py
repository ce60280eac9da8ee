"""
Database helper functions — task and project persistence.

Each helper is one read or one write against the request session.
Writes commit immediately so the response reflects stored state.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from database.models import Project, Task, User

logger = logging.getLogger(__name__)

# wire name -> column attribute
TASK_FIELDS = {
    "taskName": "task_name",
    "status": "status",
    "taskDetails": "task_details",
    "remark": "remark",
}


def _to_uuid(value: str | uuid.UUID) -> Optional[uuid.UUID]:
    """Parse an id from a path or body; ``None`` when it is not a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None


# ── Tasks ────────────────────────────────────────────────────────────


async def create_task(session: AsyncSession, project: Optional[str], **fields: str) -> Task:
    task = Task(
        project=project,
        task_name=fields["taskName"],
        status=fields["status"],
        task_details=fields["taskDetails"],
        remark=fields["remark"],
    )
    session.add(task)
    await session.commit()
    return task


async def list_tasks_for_project(session: AsyncSession, project_id: str) -> List[Task]:
    result = await session.execute(
        select(Task).where(Task.project == project_id)
    )
    return list(result.scalars().all())


async def get_task(session: AsyncSession, task_id: str) -> Optional[Task]:
    tid = _to_uuid(task_id)
    if tid is None:
        return None
    return await session.get(Task, tid)


async def update_task(session: AsyncSession, task: Task, changes: Dict[str, Any]) -> Task:
    """Apply non-empty ``changes`` (wire names) to ``task``; empty values keep the stored one."""
    for wire_name, attr in TASK_FIELDS.items():
        value = changes.get(wire_name)
        if value:
            setattr(task, attr, value)
    await session.commit()
    return task


async def delete_task(session: AsyncSession, task: Task) -> None:
    await session.delete(task)
    await session.commit()


# ── Users & projects ─────────────────────────────────────────────────


async def get_user(session: AsyncSession, user_id: str) -> Optional[User]:
    uid = _to_uuid(user_id)
    if uid is None:
        return None
    return await session.get(User, uid)


async def create_project(
    session: AsyncSession,
    project_name: str,
    user: User,
    created_date: datetime,
    priority: str,
) -> Project:
    project = Project(
        project_name=project_name,
        user_id=user.id,
        created_date=created_date,
        priority=priority,
    )
    project.user = user
    session.add(project)
    await session.commit()
    return project


async def list_projects(session: AsyncSession) -> List[Project]:
    """All projects with their owning user loaded."""
    result = await session.execute(
        select(Project).options(selectinload(Project.user))
    )
    return list(result.scalars().all())
