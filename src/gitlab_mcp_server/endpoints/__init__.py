"""GitLab REST API v4 endpoint catalog."""

from __future__ import annotations

from . import (
    approvals,
    ci,
    groups,
    instance,
    issues,
    merge_requests,
    pipelines,
    projects,
    repositories,
    users,
)
from .base import Endpoint, Param, endpoint, param, tool_name

ENDPOINTS: tuple[Endpoint, ...] = (
    *projects.ENDPOINTS,
    *repositories.ENDPOINTS,
    *merge_requests.ENDPOINTS,
    *issues.ENDPOINTS,
    *pipelines.ENDPOINTS,
    *ci.ENDPOINTS,
    *approvals.ENDPOINTS,
    *groups.ENDPOINTS,
    *users.ENDPOINTS,
    *instance.ENDPOINTS,
)

_BY_TOOL_NAME = {e.tool_name: e for e in ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by its tool name. Raises ``KeyError`` if unknown."""
    return _BY_TOOL_NAME[name]


__all__ = [
    "ENDPOINTS",
    "Endpoint",
    "Param",
    "endpoint",
    "get_endpoint",
    "param",
    "tool_name",
]
