"""
Tests for the task, project and user-directory routes.
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

TASK_BODY = {
    "project": "p-1",
    "taskName": "Write docs",
    "status": "todo",
    "taskDetails": "Document the API",
    "remark": "none",
}


async def _add_task(client, **overrides):
    resp = await client.post("/api/addTasks", json={**TASK_BODY, **overrides})
    assert resp.status_code == 201
    return resp.json()["task"]


class TestTasks:
    @pytest.mark.asyncio
    async def test_add_and_list_by_project(self, client):
        task = await _add_task(client)
        await _add_task(client, project="p-2", taskName="Other")

        resp = await client.get("/api/getTasks/p-1")
        assert resp.status_code == 200
        tasks = resp.json()
        assert [t["id"] for t in tasks] == [task["id"]]
        assert tasks[0]["taskName"] == "Write docs"

    @pytest.mark.asyncio
    async def test_add_missing_field(self, client):
        body = dict(TASK_BODY, remark="")
        resp = await client.post("/api/addTasks", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"msg": "All fields are required"}

    @pytest.mark.asyncio
    async def test_project_is_optional(self, client):
        body = {k: v for k, v in TASK_BODY.items() if k != "project"}
        resp = await client.post("/api/addTasks", json=body)
        assert resp.status_code == 201
        assert resp.json()["task"]["project"] is None

    @pytest.mark.asyncio
    async def test_update_only_non_empty_fields(self, client):
        task = await _add_task(client)
        resp = await client.put(
            f"/api/updateTask/{task['id']}",
            json={"status": "done", "remark": ""},
        )
        assert resp.status_code == 200
        updated = resp.json()["task"]
        assert updated["status"] == "done"
        assert updated["remark"] == "none"
        assert updated["taskName"] == "Write docs"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_id", [str(uuid.uuid4()), "not-a-uuid"])
    async def test_update_unknown_task_is_404(self, client, task_id):
        resp = await client.put(f"/api/updateTask/{task_id}", json={"status": "done"})
        assert resp.status_code == 404
        assert resp.json() == {"msg": "Task not found"}

    @pytest.mark.asyncio
    async def test_update_without_body_unknown_task_is_404(self, client):
        resp = await client.put(f"/api/updateTask/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json() == {"msg": "Task not found"}

    @pytest.mark.asyncio
    async def test_update_without_body_keeps_task(self, client):
        task = await _add_task(client)
        resp = await client.put(f"/api/updateTask/{task['id']}")
        assert resp.status_code == 200
        assert resp.json()["task"] == task

    @pytest.mark.asyncio
    async def test_delete(self, client):
        task = await _add_task(client)
        resp = await client.delete(f"/api/deleteTask/{task['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"msg": "Task deleted successfully"}

        resp = await client.delete(f"/api/deleteTask/{task['id']}")
        assert resp.status_code == 404
        assert (await client.get("/api/getTasks/p-1")).json() == []


class TestUsersAndProjects:
    async def _signup(self, client, name="A", email="a@x.com"):
        await client.post(
            "/api/signup",
            json={"name": name, "email": email, "password": "pw", "role": "user"},
        )
        users = (await client.get("/api/getUsers")).json()
        return next(u for u in users if u["name"] == name)

    @pytest.mark.asyncio
    async def test_get_users_is_id_and_name_only(self, client):
        await self._signup(client)
        users = (await client.get("/api/getUsers")).json()
        assert len(users) == 1
        assert set(users[0]) == {"id", "name"}

    @pytest.mark.asyncio
    async def test_add_and_list_projects_with_owner_name(self, client):
        owner = await self._signup(client, name="Owner")
        resp = await client.post(
            "/api/addProject",
            json={
                "projectName": "Tracker",
                "user": owner["id"],
                "createdDate": "2024-05-01T10:00:00Z",
                "priority": "high",
            },
        )
        assert resp.status_code == 201
        assert resp.json()["msg"] == "Project added successfully"

        projects = (await client.get("/api/getProjects")).json()
        assert len(projects) == 1
        assert projects[0]["projectName"] == "Tracker"
        assert projects[0]["priority"] == "high"
        assert projects[0]["user"] == {"id": owner["id"], "name": "Owner"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"projectName": ""},
            {"priority": "urgent"},
            {"user": str(uuid.uuid4())},
        ],
    )
    async def test_add_project_rejects_bad_input(self, client, overrides):
        owner = await self._signup(client)
        body = {
            "projectName": "Tracker",
            "user": owner["id"],
            "createdDate": "2024-05-01T10:00:00Z",
            "priority": "low",
            **overrides,
        }
        resp = await client.post("/api/addProject", json=body)
        assert resp.status_code == 400


class TestStoreErrors:
    @pytest.mark.asyncio
    async def test_store_failure_is_opaque_500(self, client):
        failure = OperationalError("SELECT 1", {}, Exception("disk I/O error"))
        with patch("api.routes.list_projects", AsyncMock(side_effect=failure)):
            resp = await client.get("/api/getProjects")
        assert resp.status_code == 500
        assert resp.json() == {"msg": "Server error"}
