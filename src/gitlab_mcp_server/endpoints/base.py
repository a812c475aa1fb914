"""Endpoint and parameter definitions for the GitLab REST catalog."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, create_model

HttpMethod = Literal["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
ParamType = Literal[
    "string", "integer", "number", "boolean", "array", "integer[]", "object", "any"
]
ParamLocation = Literal["path", "query", "body"]

# Everything that is not a path parameter travels in the query string for these verbs.
QUERY_METHODS = frozenset({"GET", "HEAD", "DELETE"})

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")

_PYTHON_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "array": list[str],
    "integer[]": list[int],
    "object": dict[str, Any],
    "any": Any,
}

_RESOURCE_NOUNS = {
    "projects": "project",
    "groups": "group",
    "users": "user",
    "namespaces": "namespace",
    "snippets": "snippet",
    "runners": "runner",
    "hooks": "system hook",
    "keys": "SSH key",
    "topics": "topic",
    "broadcast_messages": "broadcast message",
    "deploy_keys": "deploy key",
    "application": "application setting",
    "applications": "application",
    "todos": "to-do item",
}

_PATH_PARAM_DOCS = {
    "merge_request_iid": "The internal ID of the merge request",
    "issue_iid": "The internal ID of the project's issue",
    "epic_iid": "The internal ID of the epic",
    "pipeline_id": "The ID of the pipeline",
    "trigger_id": "The ID of the pipeline trigger",
    "job_id": "The ID of the job",
    "branch": "The name of the branch",
    "file_path": "URL-encoded full path to the file, for example lib/class.rb",
    "sha": "The commit hash or name of a repository branch or tag",
    "tag_name": "The name of the tag",
    "key": "The key of the variable",
    "user_id": "The ID of the user",
    "group_id": "The ID of the group",
    "note_id": "The ID of the note",
    "discussion_id": "The ID of the discussion thread",
    "milestone_id": "The ID of the milestone",
    "label_id": "The ID or title of the label",
    "hook_id": "The ID of the webhook",
    "environment_id": "The ID of the environment",
    "deployment_id": "The ID of the deployment",
    "approval_rule_id": "The ID of the approval rule",
    "key_id": "The ID of the key",
    "token_id": "The ID of the token",
    "runner_id": "The ID of the runner",
    "snippet_id": "The ID of the snippet",
    "slug": "The slug of the wiki page",
    "name": "The name of the protected branch or tag, or a wildcard",
    "board_id": "The ID of the board",
    "list_id": "The ID of the board list",
    "award_id": "The ID of the emoji reaction",
    "ref_name": "The name of the branch or tag",
    "agent_id": "The ID of the cluster agent",
    "release_tag": "The tag associated with the release",
    "link_id": "The ID of the release link",
    "package_id": "The ID of the package",
    "package_file_id": "The ID of the package file",
    "repository_id": "The ID of the registry repository",
    "email_id": "The ID of the email",
    "impersonation_token_id": "The ID of the impersonation token",
    "feature_flag_name": "The name of the feature flag",
    "badge_id": "The ID of the badge",
    "service_slug": "The slug of the integration, for example slack or jira",
    "pipeline_schedule_id": "The ID of the pipeline schedule",
    "project_id": "The ID or URL-encoded path of the project",
    "forked_from_id": "The ID of the project that was forked from",
    "version_id": "The ID of the merge request diff version",
    "trigger": "The hook event to test, for example push_events or tag_push_events",
    "artifact_path": "Path to a file inside the artifacts archive, for example dist/app.js",
    "issue_link_id": "The ID of an issue relationship",
}


class CatalogModel(BaseModel):
    """Base model with common behavior for catalog entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Param(CatalogModel):
    """A declared query or body field of an endpoint."""

    name: str
    type: ParamType = "string"
    description: str = ""
    required: bool = False
    enum: tuple[str, ...] | None = None

    def annotation(self) -> Any:
        if self.enum:
            return Literal[self.enum]
        return _PYTHON_TYPES[self.type]


def _slug(text: str) -> str:
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def tool_name(method: str, path: str) -> str:
    """Derive a tool name from an HTTP method and a ``/api/v4``-relative path.

    ``GET /projects/{id}/merge_requests`` becomes ``get-projects-by-id-merge-requests``.
    """
    parts = [method.lower()]
    for segment in path.strip("/").split("/"):
        named = _PLACEHOLDER_RE.sub(lambda m: f"-by-{m.group(1)}-", segment)
        parts.append(_slug(named))
    return "-".join(p for p in parts if p)


class Endpoint(CatalogModel):
    """One GitLab REST endpoint: method, templated path and its declared fields."""

    method: HttpMethod
    path: str
    summary: str
    params: tuple[Param, ...] = ()
    raw: bool = False

    @property
    def tool_name(self) -> str:
        return tool_name(self.method, self.path)

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER_RE.findall(self.path)

    @property
    def resource(self) -> str:
        return self.path.strip("/").split("/", 1)[0]

    @property
    def is_write(self) -> bool:
        return self.method not in ("GET", "HEAD")

    @property
    def tags(self) -> set[str]:
        return {"gitlab", _slug(self.resource), "write" if self.is_write else "read"}

    @property
    def description(self) -> str:
        return f"{self.summary}\n\n`{self.method} /api/v4{self.path}`"

    def param_location(self, name: str) -> ParamLocation:
        """Where an argument goes in the outgoing request."""
        if name in self.path_params:
            return "path"
        return "query" if self.method in QUERY_METHODS else "body"

    def path_param_doc(self, name: str) -> str:
        if name == "id":
            noun = _RESOURCE_NOUNS.get(self.resource, self.resource.rstrip("s"))
            if self.resource in ("projects", "groups"):
                return f"The ID or URL-encoded path of the {noun}"
            return f"The ID of the {noun}"
        return _PATH_PARAM_DOCS.get(name, f"The {name.replace('_', ' ')}")

    def arguments_model(self) -> type[BaseModel]:
        return _arguments_model(self)

    def input_schema(self) -> dict[str, Any]:
        return self.arguments_model().model_json_schema()


def _field_name(index: int, name: str) -> str:
    # Aliases carry the wire name; internal names only have to be valid and unique.
    return f"f{index}_{re.sub(r'[^0-9A-Za-z_]', '_', name)}"


@functools.cache
def _arguments_model(endpoint: Endpoint) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for name in endpoint.path_params:
        fields[_field_name(len(fields), name)] = (
            str,
            Field(alias=name, min_length=1, description=endpoint.path_param_doc(name)),
        )
    for param in endpoint.params:
        annotation = param.annotation()
        description = param.description or None
        if param.required:
            fields[_field_name(len(fields), param.name)] = (
                annotation,
                Field(alias=param.name, description=description),
            )
        else:
            if annotation is not Any:
                annotation = annotation | None
            fields[_field_name(len(fields), param.name)] = (
                annotation,
                Field(None, alias=param.name, description=description),
            )

    model_name = "".join(p.capitalize() for p in endpoint.tool_name.split("-")) + "Arguments"
    return create_model(
        model_name,
        __config__=ConfigDict(extra="allow", coerce_numbers_to_str=True),
        **fields,
    )


def param(
    name: str,
    type: ParamType = "string",
    description: str = "",
    *,
    required: bool = False,
    enum: Iterable[str] | None = None,
) -> Param:
    return Param(
        name=name,
        type=type,
        description=description,
        required=required,
        enum=tuple(enum) if enum is not None else None,
    )


def endpoint(
    method: HttpMethod,
    path: str,
    summary: str,
    *params: Param | Iterable[Param],
    raw: bool = False,
) -> Endpoint:
    """Build an endpoint; ``params`` may mix single params and shared param groups."""
    flat: list[Param] = []
    for item in params:
        if isinstance(item, Param):
            flat.append(item)
        else:
            flat.extend(item)
    return Endpoint(method=method, path=path, summary=summary, params=tuple(flat), raw=raw)
