"""Tests for the endpoint catalog: naming, placement and argument schemas."""

from __future__ import annotations

import re

import pytest
from pydantic import ValidationError

from gitlab_mcp_server.endpoints import ENDPOINTS, Endpoint, endpoint, get_endpoint, param, tool_name

_TOOL_NAME_RE = re.compile(r"^(get|head|post|put|patch|delete)(-[a-z0-9]+)+$")


class TestToolName:
    @pytest.mark.parametrize(
        ("method", "path", "expected"),
        [
            ("GET", "/projects", "get-projects"),
            ("GET", "/projects/{id}", "get-projects-by-id"),
            ("PUT", "/projects/{id}", "put-projects-by-id"),
            (
                "GET",
                "/projects/{id}/merge_requests/{merge_request_iid}/approval_state",
                "get-projects-by-id-merge-requests-by-merge-request-iid-approval-state",
            ),
            ("POST", "/ci/lint", "post-ci-lint"),
            ("GET", "/templates/gitlab_ci_ymls", "get-templates-gitlab-ci-ymls"),
        ],
    )
    def test_naming_rule(self, method, path, expected):
        assert tool_name(method, path) == expected

    def test_all_names_well_formed(self):
        for e in ENDPOINTS:
            assert _TOOL_NAME_RE.match(e.tool_name), e.tool_name

    def test_names_unique(self):
        names = [e.tool_name for e in ENDPOINTS]
        assert len(names) == len(set(names))

    def test_get_endpoint(self):
        e = get_endpoint("get-projects-by-id")
        assert e.method == "GET"
        assert e.path == "/projects/{id}"

    def test_get_endpoint_unknown(self):
        with pytest.raises(KeyError):
            get_endpoint("get-nothing-here")


class TestCatalogInvariants:
    def test_declared_params_never_shadow_placeholders(self):
        for e in ENDPOINTS:
            names = {p.name for p in e.params}
            assert not names & set(e.path_params), e.tool_name

    def test_declared_params_unique(self):
        for e in ENDPOINTS:
            names = [p.name for p in e.params]
            assert len(names) == len(set(names)), e.tool_name

    def test_placeholders_unique(self):
        for e in ENDPOINTS:
            assert len(e.path_params) == len(set(e.path_params)), e.tool_name

    def test_every_schema_builds(self):
        for e in ENDPOINTS:
            schema = e.input_schema()
            assert schema["type"] == "object", e.tool_name
            for name in e.path_params:
                assert name in schema["required"], e.tool_name

    def test_descriptions_do_not_promise_null_values(self):
        # None-valued arguments are dropped before the request is built.
        for e in ENDPOINTS:
            for p in e.params:
                assert "null" not in p.description.lower(), (e.tool_name, p.name)

    def test_covers_core_families(self):
        names = {e.tool_name for e in ENDPOINTS}
        for expected in (
            "get-projects",
            "get-projects-by-id-merge-requests",
            "post-projects-by-id-issues",
            "get-projects-by-id-pipelines-by-pipeline-id-jobs",
            "get-projects-by-id-jobs-by-job-id-trace",
            "get-groups-by-id-variables",
            "get-user",
            "get-search",
            "get-version",
        ):
            assert expected in names


class TestEndpoint:
    def test_path_params_in_order(self):
        e = get_endpoint("get-projects-by-id-merge-requests-by-merge-request-iid-notes-by-note-id")
        assert e.path_params == ["id", "merge_request_iid", "note_id"]

    def test_param_location_read_verb(self):
        e = get_endpoint("get-projects-by-id-issues")
        assert e.param_location("id") == "path"
        assert e.param_location("state") == "query"
        assert e.param_location("undeclared") == "query"

    def test_param_location_write_verb(self):
        e = get_endpoint("post-projects-by-id-issues")
        assert e.param_location("id") == "path"
        assert e.param_location("title") == "body"

    def test_param_location_delete_uses_query(self):
        e = endpoint("DELETE", "/projects/{id}", "Delete a project", param("permanently_remove", "boolean"))
        assert e.param_location("permanently_remove") == "query"

    def test_write_and_tags(self):
        get = get_endpoint("get-projects-by-id")
        delete = get_endpoint("delete-projects-by-id")
        assert not get.is_write
        assert delete.is_write
        assert get.tags == {"gitlab", "projects", "read"}
        assert delete.tags == {"gitlab", "projects", "write"}

    def test_description_names_route(self):
        e = get_endpoint("get-projects-by-id")
        assert e.description.endswith("`GET /api/v4/projects/{id}`")

    def test_path_param_doc(self):
        assert "URL-encoded path of the project" in get_endpoint("get-projects-by-id").path_param_doc("id")
        assert get_endpoint("get-users-by-id").path_param_doc("id") == "The ID of the user"
        mr = get_endpoint("get-projects-by-id-merge-requests-by-merge-request-iid")
        assert mr.path_param_doc("merge_request_iid") == "The internal ID of the merge request"

    def test_endpoints_hashable(self):
        e = endpoint("GET", "/projects/{id}", "Get a project")
        assert e == endpoint("GET", "/projects/{id}", "Get a project")
        assert hash(e) == hash(endpoint("GET", "/projects/{id}", "Get a project"))
        assert isinstance(e, Endpoint)


class TestArgumentsModel:
    def _sample(self) -> Endpoint:
        return endpoint(
            "GET",
            "/projects/{id}/issues",
            "List issues",
            param("state", enum=("opened", "closed", "all")),
            param("labels", "array"),
            param("iids", "integer[]"),
            param("confidential", "boolean"),
            param("from", description="A reserved word in Python"),
            param("range[start]"),
        )

    def test_path_param_required(self):
        with pytest.raises(ValidationError):
            self._sample().arguments_model().model_validate({"state": "opened"})

    def test_path_param_not_empty(self):
        with pytest.raises(ValidationError):
            self._sample().arguments_model().model_validate({"id": ""})

    def test_numeric_id_coerced(self):
        model = self._sample().arguments_model().model_validate({"id": 42})
        assert model.model_dump(by_alias=True, exclude_none=True) == {"id": "42"}

    def test_enum_enforced(self):
        with pytest.raises(ValidationError):
            self._sample().arguments_model().model_validate({"id": "1", "state": "merged"})

    def test_aliases_and_extras_forwarded(self):
        model = self._sample().arguments_model().model_validate(
            {
                "id": "group/project",
                "from": "2024-01-01",
                "range[start]": "a",
                "labels": ["bug"],
                "iids": [1, 2],
                "custom_field": 1,
            }
        )
        assert model.model_dump(by_alias=True, exclude_none=True) == {
            "id": "group/project",
            "labels": ["bug"],
            "iids": [1, 2],
            "from": "2024-01-01",
            "range[start]": "a",
            "custom_field": 1,
        }

    def test_required_declared_param(self):
        e = endpoint("POST", "/projects/{id}/issues", "Create", param("title", required=True))
        with pytest.raises(ValidationError):
            e.arguments_model().model_validate({"id": "1"})

    def test_schema_properties(self):
        schema = self._sample().input_schema()
        props = schema["properties"]
        assert schema["required"] == ["id"]
        assert set(props) == {"id", "state", "labels", "iids", "confidential", "from", "range[start]"}
        assert props["id"]["minLength"] == 1
        assert props["from"]["description"] == "A reserved word in Python"
        assert schema.get("additionalProperties") is True

    def test_model_cached(self):
        e = self._sample()
        assert e.arguments_model() is e.arguments_model()
