"""Tests for exceptions."""

from gitlab_mcp_server.exceptions import (
    GitLabApiError,
    GitLabArgumentsError,
    GitLabAuthError,
    GitLabNotFoundError,
    GitLabWriteDisabledError,
)


def test_api_error():
    e = GitLabApiError(500, "Internal Server Error", "something broke")
    assert e.status_code == 500
    assert "500" in str(e)
    assert "something broke" in str(e)


def test_auth_error_401():
    e = GitLabAuthError(401)
    assert e.status_code == 401
    assert "Unauthorized" in str(e)


def test_auth_error_403():
    e = GitLabAuthError(403)
    assert e.status_code == 403
    assert "Forbidden" in str(e)


def test_not_found_error():
    e = GitLabNotFoundError("resource not found")
    assert e.status_code == 404


def test_write_disabled():
    e = GitLabWriteDisabledError()
    assert "read-only" in str(e).lower() or "read_only" in str(e).lower()


def test_api_error_prefers_json_message():
    e = GitLabApiError(400, "Bad Request", '{"message": {"name": ["has already been taken"]}}')
    assert e.message == '{"name": ["has already been taken"]}'
    assert "has already been taken" in str(e)


def test_api_error_description_field():
    e = GitLabApiError(400, "Bad Request", '{"error": "", "description": "branch is protected"}')
    assert e.message == "branch is protected"


def test_api_error_non_json_body():
    e = GitLabApiError(502, "Bad Gateway", "<html>oops</html>")
    assert e.message == ""
    assert "<html>oops</html>" in str(e)


def test_arguments_error():
    errors = [
        {"loc": ("id",), "msg": "Field required", "type": "missing"},
        {"loc": ("state",), "msg": "Input should be 'opened'", "type": "literal_error"},
    ]
    e = GitLabArgumentsError("get-projects-by-id", errors)
    assert e.tool_name == "get-projects-by-id"
    assert e.errors == errors
    assert str(e) == (
        "Invalid arguments for get-projects-by-id: id: Field required; state: Input should be 'opened'"
    )
