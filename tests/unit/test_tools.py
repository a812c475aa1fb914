"""Tool-level tests — call endpoint tools via FastMCP Client with mocked API."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import pytest
import respx
from fastmcp import Client, FastMCP
from httpx import Response

from gitlab_mcp_server.client import GitLabClient
from gitlab_mcp_server.config import GitLabConfig
from gitlab_mcp_server.endpoints import ENDPOINTS, endpoint, param
from gitlab_mcp_server.servers.gitlab import GitLabEndpointTool, register_endpoint_tools

TEST_URL = "https://gitlab.example.com"
TEST_TOKEN = "test-token"


def _make_mcp(*, read_only: bool = False) -> tuple[FastMCP, Any]:
    """Build a FastMCP server with mocked lifespan."""
    config = GitLabConfig(url=TEST_URL, token=TEST_TOKEN, read_only=read_only)
    client = GitLabClient(config)

    @asynccontextmanager
    async def mock_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
        try:
            yield {"client": client, "config": config}
        finally:
            await client.close()

    # Import the real mcp instance and swap lifespan
    from gitlab_mcp_server.servers.gitlab import mcp

    original_lifespan = mcp._lifespan
    mcp._lifespan = mock_lifespan
    return mcp, original_lifespan


@pytest.fixture
async def tool_client():
    """FastMCP test client with mocked lifespan and respx-mocked HTTP."""
    mcp, original_lifespan = _make_mcp()
    with respx.mock(base_url=f"{TEST_URL}/api/v4", assert_all_called=False) as router:
        async with Client(mcp) as client:
            yield client, router
    mcp._lifespan = original_lifespan


@pytest.fixture
async def readonly_client():
    """FastMCP test client in read-only mode."""
    mcp, original_lifespan = _make_mcp(read_only=True)
    with respx.mock(base_url=f"{TEST_URL}/api/v4", assert_all_called=False) as router:
        async with Client(mcp) as client:
            yield client, router
    mcp._lifespan = original_lifespan


def _text(result: Any) -> str:
    for item in result.content:
        if hasattr(item, "text"):
            return item.text
    raise AssertionError(f"no text content in {result!r}")


def _parse(result: Any) -> dict | list:
    """Extract JSON from a tool call result."""
    return json.loads(_text(result))


async def _call_error(client: Client, name: str, arguments: dict[str, Any]) -> dict:
    """Call a tool that should fail and return its error payload."""
    result = await client.call_tool(name, arguments, raise_on_error=False)
    assert result.is_error
    return _parse(result)


# ═══════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════


class TestRegistration:
    async def test_all_endpoints_listed(self, tool_client):
        client, _ = tool_client
        tools = await client.list_tools()
        names = {t.name for t in tools}
        assert names == {e.tool_name for e in ENDPOINTS}

    async def test_patterns_filter_tools(self):
        server = FastMCP(name="filtered")
        tools = register_endpoint_tools(server, ENDPOINTS, ["get-projects*", "!*-hooks*"])
        names = {t.name for t in tools}
        assert "get-projects-by-id" in names
        assert "post-projects" not in names
        assert not any("-hooks" in n for n in names)
        async with Client(server) as client:
            listed = {t.name for t in await client.list_tools()}
        assert listed == names

    def test_tool_from_endpoint(self):
        e = endpoint("DELETE", "/projects/{id}", "Delete a project", param("permanently_remove", "boolean"))
        tool = GitLabEndpointTool.from_endpoint(e)
        assert tool.name == "delete-projects-by-id"
        assert tool.tags == {"gitlab", "projects", "write"}
        assert tool.parameters["required"] == ["id"]
        assert "permanently_remove" in tool.parameters["properties"]
        assert tool.annotations.destructive_hint is True
        assert tool.annotations.read_only_hint is False

    def test_read_tool_annotations(self):
        tool = GitLabEndpointTool.from_endpoint(endpoint("GET", "/projects", "List projects"))
        assert tool.annotations.read_only_hint is True
        assert tool.annotations.idempotent_hint is True
        assert tool.annotations.open_world_hint is True


# ═══════════════════════════════════════════════════════
# Read endpoints
# ═══════════════════════════════════════════════════════


class TestReadTools:
    async def test_get_project(self, tool_client):
        client, router = tool_client
        router.get("/projects/123").mock(return_value=Response(200, json={"id": 123, "name": "demo"}))
        result = await client.call_tool("get-projects-by-id", {"id": "123"})
        assert not result.is_error
        data = _parse(result)
        assert data["id"] == 123
        assert data["name"] == "demo"

    async def test_numeric_id_accepted(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/5").mock(return_value=Response(200, json={"id": 5}))
        await client.call_tool("get-projects-by-id", {"id": 5})
        assert route.called

    async def test_namespaced_project_path(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/grp%2Fproj").mock(return_value=Response(200, json={"id": 1}))
        await client.call_tool("get-projects-by-id", {"id": "grp/proj"})
        assert route.called

    async def test_encoded_project_path_sent_once(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/grp%2Fproj").mock(return_value=Response(200, json={"id": 1}))
        double = router.get("/projects/grp%252Fproj").mock(return_value=Response(404))
        result = await client.call_tool("get-projects-by-id", {"id": "grp%2Fproj"})
        assert not result.is_error
        assert route.called
        assert not double.called

    async def test_project_url_as_id(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/grp%2Fproj").mock(return_value=Response(200, json={"id": 1}))
        await client.call_tool("get-projects-by-id", {"id": f"{TEST_URL}/grp/proj"})
        assert route.called

    async def test_list_is_paginated(self, tool_client):
        client, router = tool_client
        router.get("/projects").mock(
            return_value=Response(
                200,
                json=[{"id": 1}, {"id": 2}],
                headers={"X-Total": "5", "X-Next-Page": "2"},
            )
        )
        data = _parse(await client.call_tool("get-projects", {"per_page": 2}))
        assert data["items"] == [{"id": 1}, {"id": 2}]
        assert data["count"] == 2
        assert data["total"] == 5
        assert data["next_page"] == 2
        assert data["has_more"] is True

    async def test_query_forwarding(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/1/merge_requests").mock(return_value=Response(200, json=[]))
        await client.call_tool(
            "get-projects-by-id-merge-requests",
            {"id": "1", "state": "opened", "labels": "bug,ui", "custom_ids": [1, 2]},
        )
        params = route.calls.last.request.url.params
        assert params["state"] == "opened"
        assert params["labels"] == "bug,ui"
        assert params.get_list("custom_ids[]") == ["1", "2"]
        assert "id" not in params
        assert route.calls.last.request.content == b""

    async def test_raw_trace(self, tool_client):
        client, router = tool_client
        router.get("/projects/1/jobs/9/trace").mock(return_value=Response(200, text="step 1\nstep 2"))
        result = await client.call_tool("get-projects-by-id-jobs-by-job-id-trace", {"id": "1", "job_id": 9})
        assert _text(result) == "step 1\nstep 2"

    async def test_binary_archive(self, tool_client):
        client, router = tool_client
        router.get("/projects/1/repository/archive").mock(
            return_value=Response(
                200, content=b"\x1f\x8b\x08\x00\xff", headers={"content-type": "application/gzip"}
            )
        )
        data = _parse(await client.call_tool("get-projects-by-id-repository-archive", {"id": "1"}))
        assert data["encoding"] == "base64"
        assert data["content_type"] == "application/gzip"
        assert data["size"] == 5

    async def test_not_found(self, tool_client):
        client, router = tool_client
        router.get("/projects/999").mock(
            return_value=Response(404, json={"message": "404 Project Not Found"})
        )
        data = await _call_error(client, "get-projects-by-id", {"id": "999"})
        assert data["status_code"] == 404
        assert "404 Project Not Found" in data["error"]
        assert "hint" in data

    async def test_auth_error(self, tool_client):
        client, router = tool_client
        router.get("/user").mock(return_value=Response(401, json={"message": "401 Unauthorized"}))
        data = await _call_error(client, "get-user", {})
        assert data["status_code"] == 401
        assert "GITLAB_TOKEN" in data["hint"]

    async def test_missing_path_param(self, tool_client):
        client, router = tool_client
        route = router.get("/projects/1").mock(return_value=Response(200, json={}))
        data = await _call_error(client, "get-projects-by-id", {})
        assert "Invalid arguments for get-projects-by-id" in data["error"]
        assert data["errors"][0]["loc"] == ["id"]
        assert not route.called

    async def test_invalid_enum(self, tool_client):
        client, _ = tool_client
        data = await _call_error(
            client, "get-projects-by-id-merge-requests", {"id": "1", "state": "bogus"}
        )
        assert data["errors"][0]["loc"] == ["state"]


# ═══════════════════════════════════════════════════════
# Write endpoints
# ═══════════════════════════════════════════════════════


class TestWriteTools:
    async def test_body_forwarding(self, tool_client):
        client, router = tool_client
        route = router.post("/projects/1/issues").mock(
            return_value=Response(201, json={"iid": 7, "title": "Bug"})
        )
        data = _parse(
            await client.call_tool(
                "post-projects-by-id-issues",
                {"id": "1", "title": "Bug", "labels": "bug,ui", "confidential": False},
            )
        )
        assert data["iid"] == 7
        request = route.calls.last.request
        assert json.loads(request.content) == {"title": "Bug", "labels": "bug,ui", "confidential": False}
        assert not request.url.params

    async def test_put_with_path_params(self, tool_client):
        client, router = tool_client
        route = router.put("/projects/grp%2Fproj/merge_requests/3").mock(
            return_value=Response(200, json={"iid": 3, "title": "Renamed"})
        )
        await client.call_tool(
            "put-projects-by-id-merge-requests-by-merge-request-iid",
            {"id": "grp/proj", "merge_request_iid": 3, "title": "Renamed"},
        )
        assert json.loads(route.calls.last.request.content) == {"title": "Renamed"}

    async def test_delete_no_content(self, tool_client):
        client, router = tool_client
        route = router.delete("/projects/1/repository/branches/feature%2Fx").mock(
            return_value=Response(204)
        )
        data = _parse(
            await client.call_tool(
                "delete-projects-by-id-repository-branches-by-branch",
                {"id": "1", "branch": "feature/x"},
            )
        )
        assert data == {"status": "success"}
        assert route.called

    async def test_conflict_hint(self, tool_client):
        client, router = tool_client
        router.post("/projects/1/repository/branches").mock(
            return_value=Response(400, json={"message": "Branch already exists"})
        )
        data = await _call_error(
            client,
            "post-projects-by-id-repository-branches",
            {"id": "1", "branch": "main", "ref": "main"},
        )
        assert data["status_code"] == 400
        assert "Branch already exists" in data["error"]

    async def test_read_only_blocks_writes(self, readonly_client):
        client, router = readonly_client
        route = router.post("/projects/1/issues").mock(return_value=Response(201, json={}))
        data = await _call_error(client, "post-projects-by-id-issues", {"id": "1", "title": "x"})
        assert "read-only" in data["hint"]
        assert not route.called

    async def test_read_only_allows_reads(self, readonly_client):
        client, router = readonly_client
        router.get("/projects/1").mock(return_value=Response(200, json={"id": 1}))
        data = _parse(await client.call_tool("get-projects-by-id", {"id": "1"}))
        assert data["id"] == 1

    async def test_head_returns_gitlab_headers(self, tool_client):
        client, router = tool_client
        route = router.head("/projects/1/repository/files/docs%2FREADME.md").mock(
            return_value=Response(200, headers={"X-Gitlab-Size": "42", "X-Gitlab-Ref": "main"})
        )
        data = _parse(
            await client.call_tool(
                "head-projects-by-id-repository-files-by-file-path",
                {"id": "1", "file_path": "docs/README.md", "ref": "main"},
            )
        )
        assert data["status"] == "success"
        assert data["headers"]["x-gitlab-size"] == "42"
        assert route.calls.last.request.url.params["ref"] == "main"
