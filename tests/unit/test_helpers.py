"""Tests for server helper functions."""

from __future__ import annotations

import pytest

from gitlab_mcp_server.endpoints import endpoint, get_endpoint, param
from gitlab_mcp_server.servers._helpers import (
    _parse_gitlab_project_url,
    _render_path,
    _split_arguments,
    _tool_enabled,
)


class TestParseProjectUrl:
    def test_plain_path_unchanged(self):
        assert _parse_gitlab_project_url("my-group/my-project") == "my-group/my-project"

    def test_numeric_id_unchanged(self):
        assert _parse_gitlab_project_url("123") == "123"

    def test_project_url(self):
        assert _parse_gitlab_project_url("https://gitlab.com/my-group/sub/my-project") == (
            "my-group/sub/my-project"
        )

    def test_url_with_dash_suffix(self):
        url = "https://gitlab.example.com/grp/proj/-/merge_requests/12"
        assert _parse_gitlab_project_url(url) == "grp/proj"

    def test_trailing_slash_and_git_suffix(self):
        assert _parse_gitlab_project_url("https://gitlab.com/grp/proj/") == "grp/proj"
        assert _parse_gitlab_project_url("https://gitlab.com/grp/proj.git") == "grp/proj"


class TestRenderPath:
    def test_numeric_id(self):
        e = get_endpoint("get-projects-by-id")
        assert _render_path(e, {"id": "42"}) == "/projects/42"

    def test_namespaced_project(self):
        e = get_endpoint("get-projects-by-id-merge-requests-by-merge-request-iid")
        assert _render_path(e, {"id": "grp/proj", "merge_request_iid": "7"}) == (
            "/projects/grp%2Fproj/merge_requests/7"
        )

    def test_project_url_as_id(self):
        e = get_endpoint("get-projects-by-id")
        assert _render_path(e, {"id": "https://gitlab.com/grp/proj"}) == "/projects/grp%2Fproj"

    def test_group_id_not_parsed_as_url(self):
        e = endpoint("GET", "/groups/{id}", "Get a group")
        assert _render_path(e, {"id": "parent/child"}) == "/groups/parent%2Fchild"

    def test_file_path_is_single_segment(self):
        e = endpoint("GET", "/projects/{id}/repository/files/{file_path}", "Get a file")
        assert _render_path(e, {"id": "1", "file_path": "src/app.py"}) == (
            "/projects/1/repository/files/src%2Fapp.py"
        )

    def test_artifact_path_keeps_slashes(self):
        e = endpoint("GET", "/projects/{id}/jobs/{job_id}/artifacts/{artifact_path}", "Get artifact")
        assert _render_path(e, {"id": "1", "job_id": "9", "artifact_path": "dist/app.js"}) == (
            "/projects/1/jobs/9/artifacts/dist/app.js"
        )


class TestSplitArguments:
    def test_read_verb(self):
        e = endpoint("GET", "/projects/{id}/issues", "List", param("state"))
        path, query, body = _split_arguments(e, {"id": "1", "state": "opened", "extra": 1})
        assert path == {"id": "1"}
        assert query == {"state": "opened", "extra": 1}
        assert body == {}

    def test_write_verb(self):
        e = endpoint("PUT", "/projects/{id}/issues/{issue_iid}", "Edit", param("title"))
        path, query, body = _split_arguments(e, {"id": "1", "issue_iid": "3", "title": "New"})
        assert path == {"id": "1", "issue_iid": "3"}
        assert query == {}
        assert body == {"title": "New"}

    def test_delete_uses_query(self):
        e = endpoint("DELETE", "/projects/{id}", "Delete", param("permanently_remove", "boolean"))
        _, query, body = _split_arguments(e, {"id": "1", "permanently_remove": True})
        assert query == {"permanently_remove": True}
        assert body == {}

    def test_none_dropped(self):
        e = endpoint("POST", "/projects", "Create", param("name"), param("path"))
        _, _, body = _split_arguments(e, {"name": "x", "path": None})
        assert body == {"name": "x"}


class TestToolEnabled:
    @pytest.mark.parametrize(
        ("patterns", "name", "expected"),
        [
            ((), "get-projects", True),
            (("get-*",), "get-projects", True),
            (("get-*",), "post-projects", False),
            (("!delete-*",), "delete-projects-by-id", False),
            (("!delete-*",), "get-projects", True),
            (("*-merge-requests*", "!post-*"), "get-projects-by-id-merge-requests", True),
            (("*-merge-requests*", "!post-*"), "post-projects-by-id-merge-requests", False),
            (("", "  "), "put-projects-by-id", True),
        ],
    )
    def test_patterns(self, patterns, name, expected):
        assert _tool_enabled(name, patterns) is expected
