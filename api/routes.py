"""
REST API routes for tasks, projects and the user directory.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import credential_store, db_session
from auth.store import CredentialStore
from database.helpers import (
    create_project,
    create_task,
    delete_task,
    get_task,
    get_user,
    list_projects,
    list_tasks_for_project,
    update_task,
)
from database.models import Priority, Project, Task
from utils.errors import NotFound, ValidationError
from utils.schemas import (
    ProjectCreate,
    ProjectOut,
    TaskCreate,
    TaskOut,
    TaskUpdate,
    UserSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _task_out(task: Task) -> Dict[str, Any]:
    return TaskOut(
        id=str(task.id),
        project=task.project,
        taskName=task.task_name,
        status=task.status,
        taskDetails=task.task_details,
        remark=task.remark,
    ).model_dump()


def _project_out(project: Project) -> Dict[str, Any]:
    owner = None
    if project.user is not None:
        owner = UserSummary(id=str(project.user.id), name=project.user.name)
    return ProjectOut(
        id=str(project.id),
        projectName=project.project_name,
        user=owner,
        createdDate=project.created_date,
        priority=project.priority,
    ).model_dump(mode="json")


# ── Tasks ────────────────────────────────────────────────────────────


@router.post("/addTasks", status_code=status.HTTP_201_CREATED)
async def add_task(
    req: TaskCreate,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    if not (req.taskName and req.status and req.taskDetails and req.remark):
        raise ValidationError()

    task = await create_task(
        session,
        req.project,
        taskName=req.taskName,
        status=req.status,
        taskDetails=req.taskDetails,
        remark=req.remark,
    )
    logger.info("Task %s added to project %s", task.id, task.project)
    return {"msg": "Task added successfully", "task": _task_out(task)}


@router.get("/getTasks/{project_id}")
async def get_tasks(
    project_id: str,
    session: AsyncSession = Depends(db_session),
) -> List[Dict[str, Any]]:
    tasks = await list_tasks_for_project(session, project_id)
    return [_task_out(t) for t in tasks]


@router.put("/updateTask/{task_id}")
async def edit_task(
    task_id: str,
    req: Optional[TaskUpdate] = None,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    task = await get_task(session, task_id)
    if task is None:
        logger.info("Task %s not found for update", task_id)
        raise NotFound("Task not found")

    changes = (req or TaskUpdate()).model_dump(exclude_none=True)
    task = await update_task(session, task, changes)
    logger.info("Task %s updated", task.id)
    return {"msg": "Task updated successfully", "task": _task_out(task)}


@router.delete("/deleteTask/{task_id}")
async def remove_task(
    task_id: str,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    task = await get_task(session, task_id)
    if task is None:
        raise NotFound("Task not found")

    await delete_task(session, task)
    logger.info("Task %s deleted", task_id)
    return {"msg": "Task deleted successfully"}


# ── Users ────────────────────────────────────────────────────────────


@router.get("/getUsers")
async def get_users(
    store: CredentialStore = Depends(credential_store),
) -> List[Dict[str, Any]]:
    users = await store.list_users()
    return [UserSummary(id=str(u.id), name=u.name).model_dump() for u in users]


# ── Projects ─────────────────────────────────────────────────────────


@router.post("/addProject", status_code=status.HTTP_201_CREATED)
async def add_project(
    req: ProjectCreate,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    if not (req.projectName and req.user and req.createdDate and req.priority):
        raise ValidationError()
    if req.priority not in {p.value for p in Priority}:
        raise ValidationError(f"Invalid priority: {req.priority}")

    owner = await get_user(session, req.user)
    if owner is None:
        raise ValidationError("User not found")

    project = await create_project(
        session,
        project_name=req.projectName,
        user=owner,
        created_date=req.createdDate,
        priority=req.priority,
    )
    logger.info("Project %s added for user %s", project.id, owner.id)
    return {"msg": "Project added successfully", "project": _project_out(project)}


@router.get("/getProjects")
async def get_projects(
    session: AsyncSession = Depends(db_session),
) -> List[Dict[str, Any]]:
    projects = await list_projects(session)
    return [_project_out(p) for p in projects]
