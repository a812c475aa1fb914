"""Tests for GitLab API client."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
import respx

from gitlab_mcp_server.client import GitLabClient, flatten_query
from gitlab_mcp_server.config import GitLabConfig
from gitlab_mcp_server.exceptions import GitLabApiError, GitLabAuthError, GitLabNotFoundError

BASE = "https://gitlab.example.com/api/v4"


def _make_client() -> GitLabClient:
    return GitLabClient(GitLabConfig(url="https://gitlab.example.com", token="test-token"))


class TestEncodeSegment:
    def test_numeric_string(self):
        assert GitLabClient.encode_segment("123") == "123"

    def test_integer(self):
        assert GitLabClient.encode_segment(123) == "123"

    def test_path(self):
        assert GitLabClient.encode_segment("my-group/my-project") == "my-group%2Fmy-project"

    def test_file_path(self):
        assert GitLabClient.encode_segment("lib/class.rb") == "lib%2Fclass.rb"

    def test_keep_slashes(self):
        assert GitLabClient.encode_segment("dist/app bundle.js", keep_slashes=True) == (
            "dist/app%20bundle.js"
        )

    def test_underscored_number_is_not_numeric(self):
        assert GitLabClient.encode_segment("1_000") == "1_000"

    def test_already_encoded_path_not_double_encoded(self):
        assert GitLabClient.encode_segment("my-group%2Fmy-project") == "my-group%2Fmy-project"

    def test_already_encoded_keep_slashes(self):
        assert GitLabClient.encode_segment("dist%2Fapp.js", keep_slashes=True) == "dist/app.js"


class TestFlattenQuery:
    def test_scalars_and_none(self):
        assert flatten_query({"search": "api", "page": 2, "owned": None}) == [
            ("search", "api"),
            ("page", 2),
        ]

    def test_booleans(self):
        assert flatten_query({"archived": False, "starred": True}) == [
            ("archived", "false"),
            ("starred", "true"),
        ]

    def test_lists(self):
        assert flatten_query({"scope": ["pending", "running"]}) == [
            ("scope[]", "pending"),
            ("scope[]", "running"),
        ]

    def test_nested_mapping(self):
        assert flatten_query({"not": {"labels": ["bug"], "author_id": 5}}) == [
            ("not[labels][]", "bug"),
            ("not[author_id]", 5),
        ]

    def test_empty(self):
        assert flatten_query(None) == []
        assert flatten_query({}) == []


class TestRequest:
    @pytest.mark.asyncio
    async def test_get_project(self):
        async with respx.mock(base_url=BASE) as router:
            route = router.get("/projects/123").mock(
                return_value=httpx.Response(200, json={"id": 123, "name": "test"})
            )
            client = _make_client()
            result = await client.request("GET", "/projects/123")
            assert result.data == {"id": 123, "name": "test"}
            assert result.total is None
            assert route.calls.last.request.headers["PRIVATE-TOKEN"] == "test-token"

    @pytest.mark.asyncio
    async def test_auth_error_401(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123").mock(return_value=httpx.Response(401, text="Unauthorized"))
            client = _make_client()
            with pytest.raises(GitLabAuthError) as exc_info:
                await client.request("GET", "/projects/123")
            assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_forbidden_403(self):
        async with respx.mock(base_url=BASE) as router:
            router.post("/projects").mock(return_value=httpx.Response(403, text="Forbidden"))
            client = _make_client()
            with pytest.raises(GitLabAuthError) as exc_info:
                await client.request("POST", "/projects", body={"name": "x"})
            assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_not_found_error(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/999").mock(return_value=httpx.Response(404, text="Not Found"))
            client = _make_client()
            with pytest.raises(GitLabNotFoundError):
                await client.request("GET", "/projects/999")

    @pytest.mark.asyncio
    async def test_server_error(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123").mock(
                return_value=httpx.Response(500, text="Internal Server Error")
            )
            client = _make_client()
            with pytest.raises(GitLabApiError) as exc_info:
                await client.request("GET", "/projects/123")
            assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_html_response_error(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123").mock(
                return_value=httpx.Response(
                    200,
                    text="<html><body>Login</body></html>",
                    headers={"content-type": "text/html"},
                )
            )
            client = _make_client()
            with pytest.raises(GitLabApiError, match="HTML"):
                await client.request("GET", "/projects/123")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/version").mock(
                return_value=httpx.Response(
                    200, text="{not json", headers={"content-type": "application/json"}
                )
            )
            client = _make_client()
            with pytest.raises(GitLabApiError, match="JSON parse error"):
                await client.request("GET", "/version")

    @pytest.mark.asyncio
    async def test_empty_response(self):
        async with respx.mock(base_url=BASE) as router:
            router.delete("/projects/123").mock(return_value=httpx.Response(204))
            client = _make_client()
            result = await client.request("DELETE", "/projects/123")
            assert result.data is None

    @pytest.mark.asyncio
    async def test_pagination_headers(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123/repository/branches").mock(
                return_value=httpx.Response(
                    200,
                    json=[{"name": "main"}, {"name": "develop"}],
                    headers={"X-Total": "7", "X-Next-Page": "2"},
                )
            )
            client = _make_client()
            result = await client.request("GET", "/projects/123/repository/branches")
            assert [b["name"] for b in result.data] == ["main", "develop"]
            assert result.total == 7
            assert result.next_page == 2

    @pytest.mark.asyncio
    async def test_last_page_has_no_next_page(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects").mock(
                return_value=httpx.Response(
                    200, json=[], headers={"X-Total": "0", "X-Next-Page": ""}
                )
            )
            client = _make_client()
            result = await client.request("GET", "/projects")
            assert result.total == 0
            assert result.next_page is None

    @pytest.mark.asyncio
    async def test_query_serialization(self):
        async with respx.mock(base_url=BASE) as router:
            route = router.get("/projects/123/merge_requests").mock(
                return_value=httpx.Response(200, json=[])
            )
            client = _make_client()
            await client.request(
                "GET",
                "/projects/123/merge_requests",
                query={"state": "opened", "labels": ["bug", "ui"], "wip": None, "draft": False},
            )
            params = route.calls.last.request.url.params
            assert params["state"] == "opened"
            assert params.get_list("labels[]") == ["bug", "ui"]
            assert params["draft"] == "false"
            assert "wip" not in params

    @pytest.mark.asyncio
    async def test_json_body(self):
        async with respx.mock(base_url=BASE) as router:
            route = router.post("/projects/123/merge_requests").mock(
                return_value=httpx.Response(201, json={"iid": 1, "title": "Test MR"})
            )
            client = _make_client()
            result = await client.request(
                "POST",
                "/projects/123/merge_requests",
                body={"source_branch": "feature", "target_branch": "main", "title": "Test MR"},
            )
            assert result.data["iid"] == 1
            sent = json.loads(route.calls.last.request.content)
            assert sent == {"source_branch": "feature", "target_branch": "main", "title": "Test MR"}

    @pytest.mark.asyncio
    async def test_raw_text(self):
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123/jobs/456/trace").mock(
                return_value=httpx.Response(200, text="line1\nline2\nline3")
            )
            client = _make_client()
            result = await client.request("GET", "/projects/123/jobs/456/trace", raw=True)
            assert result.data == "line1\nline2\nline3"

    @pytest.mark.asyncio
    async def test_raw_binary_is_base64(self):
        payload = b"PK\x03\x04\xff\xfe"
        async with respx.mock(base_url=BASE) as router:
            router.get("/projects/123/repository/archive").mock(
                return_value=httpx.Response(
                    200, content=payload, headers={"content-type": "application/zip"}
                )
            )
            client = _make_client()
            result = await client.request("GET", "/projects/123/repository/archive", raw=True)
            assert result.data == {
                "encoding": "base64",
                "content_type": "application/zip",
                "size": len(payload),
                "content": base64.b64encode(payload).decode("ascii"),
            }

    @pytest.mark.asyncio
    async def test_path_encoding(self):
        async with respx.mock(base_url=BASE) as router:
            route = router.get("/projects/my-group%2Fmy-project").mock(
                return_value=httpx.Response(200, json={"id": 1})
            )
            client = _make_client()
            path = f"/projects/{GitLabClient.encode_segment('my-group/my-project')}"
            await client.request("GET", path)
            assert route.called


async def test_head_request_has_no_body(client, mock_api):
    route = mock_api.head("/projects/1/repository/files/README.md").mock(
        return_value=httpx.Response(200, headers={"X-Gitlab-Size": "10"})
    )
    result = await client.request(
        "HEAD", "/projects/1/repository/files/README.md", query={"ref": "main"}
    )
    assert result.data is None
    assert result.headers["x-gitlab-size"] == "10"
    assert route.calls.last.request.url.params["ref"] == "main"
    await client.close()
