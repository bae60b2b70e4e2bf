"""Tests for the REST API."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from tasktracker.api import create_app
from tasktracker.api.errors import status_code_for
from tasktracker.config import Settings
from tasktracker.container import Container
from tasktracker.errors import (
    ColumnNameError,
    LastColumnError,
    NotFoundError,
    RepositoryError,
    UniqueError,
)


@pytest.fixture
def container(tmp_path: Path) -> Container:
    return Container(tmp_path / ".tasktracker")


@pytest.fixture
def app(tmp_path: Path, container: Container):
    """Create a test app over a temporary data directory."""
    return create_app(Settings(data_dir=tmp_path / ".tasktracker"), container)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def create_project(client: AsyncClient, name: str = "Board") -> dict:
    resp = await client.post("/projects", json={"name": name, "description": ""})
    assert resp.status_code == 201
    return resp.json()


async def default_column(client: AsyncClient, project_id: str) -> dict:
    resp = await client.get(f"/projects/{project_id}/columns")
    return resp.json()[0]


@pytest.mark.anyio
class TestRoot:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "running"

    async def test_request_id_generated(self, client: AsyncClient) -> None:
        resp = await client.get("/")
        assert resp.headers["X-Request-Id"]

    async def test_request_id_echoed(self, client: AsyncClient) -> None:
        resp = await client.get("/projects", headers={"X-Request-Id": "abc-123"})
        assert resp.headers["X-Request-Id"] == "abc-123"


@pytest.mark.anyio
class TestProjects:
    async def test_list_empty(self, client: AsyncClient) -> None:
        resp = await client.get("/projects")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_and_get(self, client: AsyncClient) -> None:
        project = await create_project(client)

        resp = await client.get(f"/projects/{project['id']}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Board"

        column = await default_column(client, project["id"])
        assert column["name"] == "Default"
        assert column["position"] == 0

    async def test_update(self, client: AsyncClient) -> None:
        project = await create_project(client)

        resp = await client.put(
            f"/projects/{project['id']}", json={"name": "Renamed", "description": "d"}
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "Renamed"

    async def test_delete(self, client: AsyncClient) -> None:
        project = await create_project(client)

        resp = await client.delete(f"/projects/{project['id']}")
        assert resp.status_code == 204

        resp = await client.get(f"/projects/{project['id']}")
        assert resp.status_code == 404

    async def test_get_nonexistent(self, client: AsyncClient) -> None:
        resp = await client.get(f"/projects/{uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["code"] == 404

    async def test_unparsable_id_is_not_found(self, client: AsyncClient) -> None:
        resp = await client.get("/projects/not-a-uuid")
        assert resp.status_code == 404

    async def test_empty_name_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/projects", json={"name": "", "description": ""})
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("validation:")

    async def test_malformed_body(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/projects",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 422

    async def test_storage_failure_hides_details(
        self, client: AsyncClient, container: Container
    ) -> None:
        with patch.object(
            container.project_repository, "fetch", side_effect=RepositoryError("disk gone")
        ):
            resp = await client.get("/projects")
        assert resp.status_code == 500
        assert resp.json() == {"code": 500, "message": "internal server error"}

    async def test_unexpected_error_keeps_contract(
        self, client: AsyncClient, container: Container, caplog
    ) -> None:
        caplog.set_level(logging.INFO, logger="tasktracker")

        with patch.object(container.projects, "fetch", side_effect=KeyError("boom")):
            resp = await client.get("/projects", headers={"X-Request-Id": "abc"})

        assert resp.status_code == 500
        assert resp.headers["content-type"] == "application/json"
        assert resp.json() == {"code": 500, "message": "internal server error"}
        assert resp.headers["X-Request-Id"] == "abc"
        assert any(
            "GET /projects -> 500" in r.getMessage() and "[abc]" in r.getMessage()
            for r in caplog.records
        )


@pytest.mark.anyio
class TestColumns:
    async def test_create_in_middle(self, client: AsyncClient) -> None:
        project = await create_project(client)
        pid = project["id"]
        await client.post(
            f"/projects/{pid}/columns", json={"name": "Done", "status": "done", "position": 5}
        )

        resp = await client.post(
            f"/projects/{pid}/columns", json={"name": "Doing", "status": "doing", "position": 1}
        )
        assert resp.status_code == 201

        resp = await client.get(f"/projects/{pid}/columns")
        assert [(c["name"], c["position"]) for c in resp.json()] == [
            ("Default", 0),
            ("Doing", 1),
            ("Done", 2),
        ]

    async def test_duplicate_name_conflicts(self, client: AsyncClient) -> None:
        project = await create_project(client)

        resp = await client.post(
            f"/projects/{project['id']}/columns", json={"name": "Default", "status": "x"}
        )
        assert resp.status_code == 409

    async def test_create_on_missing_project(self, client: AsyncClient) -> None:
        resp = await client.post(f"/projects/{uuid4()}/columns", json={"name": "a", "status": "a"})
        assert resp.status_code == 404

    async def test_move(self, client: AsyncClient) -> None:
        project = await create_project(client)
        pid = project["id"]
        await client.post(
            f"/projects/{pid}/columns", json={"name": "Done", "status": "done", "position": 1}
        )
        column = await default_column(client, pid)

        resp = await client.put(
            f"/columns/{column['id']}", json={"name": "Default", "status": "Default", "position": 1}
        )
        assert resp.status_code == 200
        assert resp.json()["position"] == 1

        resp = await client.get(f"/projects/{pid}/columns")
        assert [c["name"] for c in resp.json()] == ["Done", "Default"]

    async def test_update_missing_column(self, client: AsyncClient) -> None:
        resp = await client.put(
            f"/columns/{uuid4()}", json={"name": "a", "status": "a", "position": 0}
        )
        assert resp.status_code == 404

    async def test_delete_last_column_conflicts(self, client: AsyncClient) -> None:
        project = await create_project(client)
        column = await default_column(client, project["id"])

        resp = await client.delete(f"/columns/{column['id']}")
        assert resp.status_code == 409

    async def test_delete_moves_tasks(self, client: AsyncClient) -> None:
        project = await create_project(client)
        pid = project["id"]
        resp = await client.post(
            f"/projects/{pid}/columns", json={"name": "Done", "status": "done", "position": 1}
        )
        done = resp.json()
        await client.post(f"/columns/{done['id']}/tasks", json={"name": "t", "description": ""})

        resp = await client.delete(f"/columns/{done['id']}")
        assert resp.status_code == 204

        column = await default_column(client, pid)
        resp = await client.get(f"/columns/{column['id']}/tasks")
        assert [t["name"] for t in resp.json()] == ["t"]


@pytest.mark.anyio
class TestTasksAndComments:
    async def test_task_lifecycle(self, client: AsyncClient) -> None:
        project = await create_project(client)
        column = await default_column(client, project["id"])

        resp = await client.post(
            "/tasks", json={"name": "t", "description": "d", "column_id": column["id"]}
        )
        assert resp.status_code == 201
        task = resp.json()

        resp = await client.put(
            f"/tasks/{task['id']}",
            json={"name": "t2", "description": "d", "column_id": column["id"]},
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "t2"

        resp = await client.get(f"/projects/{project['id']}/tasks")
        assert [t["name"] for t in resp.json()] == ["t2"]

        resp = await client.delete(f"/tasks/{task['id']}")
        assert resp.status_code == 204

    async def test_task_in_missing_column(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/tasks", json={"name": "t", "description": "", "column_id": str(uuid4())}
        )
        assert resp.status_code == 404

    async def test_comments(self, client: AsyncClient) -> None:
        project = await create_project(client)
        column = await default_column(client, project["id"])
        resp = await client.post(
            f"/columns/{column['id']}/tasks", json={"name": "t", "description": ""}
        )
        task_id = resp.json()["id"]

        resp = await client.post(f"/tasks/{task_id}/comments", json={"text": "hello"})
        assert resp.status_code == 201
        comment = resp.json()
        assert comment["created_at"] is not None

        resp = await client.put(f"/comments/{comment['id']}", json={"text": "edited"})
        assert resp.status_code == 200
        assert resp.json()["text"] == "edited"

        resp = await client.get(f"/tasks/{task_id}/comments")
        assert [c["text"] for c in resp.json()] == ["edited"]

        resp = await client.delete(f"/comments/{comment['id']}")
        assert resp.status_code == 204

        resp = await client.get(f"/comments/{comment['id']}")
        assert resp.status_code == 404

    async def test_empty_comment_rejected(self, client: AsyncClient) -> None:
        resp = await client.post(f"/tasks/{uuid4()}/comments", json={"text": ""})
        assert resp.status_code == 400


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (NotFoundError("task", uuid4()), 404),
        (UniqueError("status taken"), 409),
        (ColumnNameError("name taken"), 409),
        (LastColumnError(uuid4()), 409),
        (RepositoryError("disk gone"), 500),
        (ValueError("anything else"), 500),
    ],
)
def test_status_code_for(error, code):
    assert status_code_for(error) == code
