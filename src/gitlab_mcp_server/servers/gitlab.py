"""GitLab MCP server — one tool per GitLab REST endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import Context, FastMCP
from fastmcp.server.dependencies import get_context
from fastmcp.tools import Tool, ToolResult
from pydantic import ValidationError

from ..client import GitLabClient, GitLabResponse
from ..config import GitLabConfig
from ..endpoints import ENDPOINTS, Endpoint
from ..exceptions import (
    GitLabApiError,
    GitLabArgumentsError,
    GitLabAuthError,
    GitLabNotFoundError,
    GitLabWriteDisabledError,
)
from ._helpers import _render_path, _split_arguments, _tool_enabled

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    config = GitLabConfig.from_env()
    config.validate()
    client = GitLabClient(config)
    logger.info("Using GitLab API at %s (read-only: %s)", config.api_url, config.read_only)
    try:
        yield {"client": client, "config": config}
    finally:
        await client.close()


mcp = FastMCP(
    name="GitLab MCP Server",
    instructions=(
        "Provides one tool per GitLab REST API v4 endpoint. Tool names follow the"
        " endpoint: GET /projects/{id} is get-projects-by-id. Path parameters are"
        " required; other arguments are sent as the query string for GET/HEAD/DELETE"
        " and as the JSON body for POST/PUT/PATCH."
    ),
    lifespan=lifespan,
)


def _get_client(ctx: Context) -> GitLabClient:
    return ctx.lifespan_context["client"]


def _get_config(ctx: Context) -> GitLabConfig:
    return ctx.lifespan_context["config"]


def _check_write(ctx: Context) -> None:
    if _get_config(ctx).read_only:
        raise GitLabWriteDisabledError


def _ok(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _paginated(items: list, total: int | None = None, next_page: int | None = None) -> str:
    """Wrap a list response with pagination metadata."""
    return json.dumps(
        {
            "items": items,
            "count": len(items),
            "total": total,
            "next_page": next_page,
            "has_more": next_page is not None,
        },
        indent=2,
        ensure_ascii=False,
    )


def _err(error: Exception) -> str:
    detail: dict[str, Any] = {"error": str(error)}

    if isinstance(error, GitLabNotFoundError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        detail["hint"] = (
            "Verify the resource ID/path. Use get-projects-by-id to confirm the project exists."
        )
    elif isinstance(error, GitLabAuthError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        detail["hint"] = "Check GITLAB_TOKEN permissions. Token needs 'api' scope."
    elif isinstance(error, GitLabWriteDisabledError):
        detail["hint"] = "Server is in read-only mode. Set GITLAB_READ_ONLY=false to enable writes."
    elif isinstance(error, GitLabArgumentsError):
        detail["errors"] = error.errors
        detail["hint"] = "Check argument names and types against the tool's input schema."
    elif isinstance(error, GitLabApiError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        if error.status_code == 409:
            detail["hint"] = "Conflict — resource may already exist or be locked."
        elif error.status_code == 422:
            detail["hint"] = "Validation failed — check required fields and formats."
        elif error.status_code == 429:
            detail["hint"] = "Rate limited. Wait before retrying."
    return json.dumps(detail, indent=2, ensure_ascii=False)


def _format_response(response: GitLabResponse, *, raw: bool = False) -> str:
    data = response.data
    if data is None:
        payload: dict[str, Any] = {"status": "success"}
        # HEAD on repository files reports metadata only through X-Gitlab-* headers.
        gitlab_headers = {
            k: v for k, v in response.headers.items() if k.lower().startswith("x-gitlab-")
        }
        if gitlab_headers:
            payload["headers"] = gitlab_headers
        return _ok(payload)
    if raw and isinstance(data, str):
        return data
    if isinstance(data, list):
        return _paginated(data, response.total, response.next_page)
    return _ok(data)


def _annotations(endpoint: Endpoint) -> dict[str, Any]:
    if not endpoint.is_write:
        return {"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True}
    if endpoint.method == "DELETE":
        return {
            "destructiveHint": True,
            "readOnlyHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        }
    if endpoint.method == "PUT":
        return {"readOnlyHint": False, "idempotentHint": True, "openWorldHint": True}
    return {"readOnlyHint": False, "openWorldHint": True}


# ════════════════════════════════════════════════════════════════════
# Endpoint tools
# ════════════════════════════════════════════════════════════════════


class GitLabEndpointTool(Tool):
    """A tool that forwards its arguments to one GitLab REST endpoint."""

    endpoint: Endpoint

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint) -> GitLabEndpointTool:
        return cls(
            name=endpoint.tool_name,
            description=endpoint.description,
            parameters=endpoint.input_schema(),
            tags=endpoint.tags,
            annotations=_annotations(endpoint),
            endpoint=endpoint,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        ctx = get_context()
        try:
            return ToolResult(content=await self._call(ctx, arguments))
        except Exception as e:
            logger.warning("Tool %s failed: %s", self.name, e)
            await ctx.error(f"{self.name}: {e}")
            return ToolResult(content=_err(e), is_error=True)

    async def _call(self, ctx: Context, arguments: dict[str, Any]) -> str:
        endpoint = self.endpoint
        try:
            validated = endpoint.arguments_model().model_validate(arguments)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise GitLabArgumentsError(self.name, errors) from e

        if endpoint.is_write:
            _check_write(ctx)

        values = validated.model_dump(by_alias=True, exclude_none=True)
        path_values, query, body = _split_arguments(endpoint, values)
        response = await _get_client(ctx).request(
            endpoint.method,
            _render_path(endpoint, path_values),
            query=query or None,
            body=body or None,
            raw=endpoint.raw,
        )
        return _format_response(response, raw=endpoint.raw)


def register_endpoint_tools(
    server: FastMCP,
    endpoints: Iterable[Endpoint] = ENDPOINTS,
    patterns: Iterable[str] = (),
) -> list[Tool]:
    """Add a tool for every endpoint whose name passes the include/exclude globs."""
    patterns = tuple(patterns)
    tools: list[Tool] = []
    for endpoint in endpoints:
        if not _tool_enabled(endpoint.tool_name, patterns):
            continue
        tools.append(server.add_tool(GitLabEndpointTool.from_endpoint(endpoint)))
    logger.debug("Registered %d GitLab tools", len(tools))
    return tools


TOOLS = register_endpoint_tools(mcp, ENDPOINTS, GitLabConfig.from_env().tool_patterns)
