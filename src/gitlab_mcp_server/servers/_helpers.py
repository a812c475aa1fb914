"""Shared helper functions for server modules."""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import unquote

from ..client import GitLabClient
from ..endpoints import Endpoint

# ════════════════════════════════════════════════════════════════════
# GitLab URL parsing
# ════════════════════════════════════════════════════════════════════

# Matches:  <host>/<namespace/project> (optionally followed by /-/...)
_PROJECT_RE = re.compile(r"https?://[^/]+/(.+?)(?:/-/.*)?$")

# Placeholders that name a project and may be given as a web URL.
_PROJECT_PLACEHOLDERS = frozenset({"project_id"})

# Trailing placeholders that GitLab reads as a multi-segment file path.
_MULTI_SEGMENT_PLACEHOLDERS = frozenset({"artifact_path"})


def _parse_gitlab_project_url(value: str) -> str:
    """Extract project_path from a GitLab project URL.

    If *value* is not a URL, returns it unchanged.
    """
    if not value.startswith(("http://", "https://")):
        return value
    m = _PROJECT_RE.match(value)
    if m:
        path = unquote(m.group(1)).rstrip("/")
        return path.removesuffix(".git")
    return value


def _names_project(endpoint: Endpoint, placeholder: str) -> bool:
    if placeholder in _PROJECT_PLACEHOLDERS:
        return True
    return placeholder == "id" and endpoint.resource == "projects"


# ════════════════════════════════════════════════════════════════════
# Request building
# ════════════════════════════════════════════════════════════════════


def _render_path(endpoint: Endpoint, values: Mapping[str, Any]) -> str:
    """Substitute every placeholder of *endpoint* with its encoded value."""
    path = endpoint.path
    for name in endpoint.path_params:
        value = str(values[name])
        if _names_project(endpoint, name):
            value = _parse_gitlab_project_url(value)
        encoded = GitLabClient.encode_segment(
            value, keep_slashes=name in _MULTI_SEGMENT_PLACEHOLDERS
        )
        path = path.replace(f"{{{name}}}", encoded, 1)
    return path


def _split_arguments(
    endpoint: Endpoint, arguments: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    """Partition validated arguments into (path, query, body); ``None`` values are dropped."""
    path: dict[str, Any] = {}
    query: dict[str, Any] = {}
    body: dict[str, Any] = {}
    targets = {"path": path, "query": query, "body": body}
    for name, value in arguments.items():
        if value is None:
            continue
        targets[endpoint.param_location(name)][name] = value
    return path, query, body


# ════════════════════════════════════════════════════════════════════
# Tool selection
# ════════════════════════════════════════════════════════════════════


def _tool_enabled(name: str, patterns: Iterable[str]) -> bool:
    """Match a tool name against include globs and ``!``-prefixed exclude globs.

    With no include globs every tool is included; excludes always win.
    """
    includes: list[str] = []
    excludes: list[str] = []
    for pattern in patterns:
        pattern = pattern.strip()
        if not pattern:
            continue
        if pattern.startswith("!"):
            excludes.append(pattern[1:])
        else:
            includes.append(pattern)
    if includes and not any(fnmatch.fnmatchcase(name, p) for p in includes):
        return False
    return not any(fnmatch.fnmatchcase(name, p) for p in excludes)
