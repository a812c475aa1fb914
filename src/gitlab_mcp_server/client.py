"""GitLab API client using httpx."""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, unquote

import httpx

from .config import GitLabConfig
from .exceptions import GitLabApiError, GitLabAuthError, GitLabNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class GitLabResponse:
    """Decoded response body plus the pagination headers GitLab sends on list endpoints."""

    data: Any
    total: int | None = None
    next_page: int | None = None
    headers: dict[str, str] = field(default_factory=dict)


def _int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name, "")
    try:
        return int(value)
    except ValueError:
        return None


def _raw_body(resp: httpx.Response) -> Any:
    # Archives and binary artifacts are not valid UTF-8.
    try:
        return resp.content.decode("utf-8")
    except UnicodeDecodeError:
        return {
            "encoding": "base64",
            "content_type": resp.headers.get("content-type", ""),
            "size": len(resp.content),
            "content": base64.b64encode(resp.content).decode("ascii"),
        }


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def flatten_query(params: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    """Serialize query arguments the way GitLab's Rails/Grape parser reads them.

    Lists become repeated ``key[]`` pairs, one level of mapping becomes
    ``key[sub]`` pairs, booleans are spelled ``true``/``false`` and ``None``
    values are dropped.
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", _query_value(v)) for v in value if v is not None)
        elif isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                if sub_value is None:
                    continue
                if isinstance(sub_value, (list, tuple)):
                    pairs.extend((f"{key}[{sub_key}][]", _query_value(v)) for v in sub_value)
                else:
                    pairs.append((f"{key}[{sub_key}]", _query_value(sub_value)))
        else:
            pairs.append((key, _query_value(value)))
    return pairs


class GitLabClient:
    """Async HTTP client for the GitLab REST API v4."""

    def __init__(self, config: GitLabConfig | None = None) -> None:
        self.config = config or GitLabConfig.from_env()
        self.config.validate()
        self._client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers={
                "PRIVATE-TOKEN": self.config.token,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=self.config.timeout,
            verify=self.config.ssl_verify,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ── HTTP helpers ──────────────────────────────────────────────

    @staticmethod
    def encode_segment(value: str | int, *, keep_slashes: bool = False) -> str:
        """Encode one path value. Numeric IDs pass through; anything else is URL-encoded.

        Values that arrive already percent-encoded are decoded first so they are not
        encoded twice. ``keep_slashes`` leaves "/" intact for trailing file paths such
        as artifact paths.
        """
        text = unquote(str(value))
        if text.isdigit():
            return text
        return quote(text, safe="/" if keep_slashes else "")

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        query = flatten_query(params)
        if query:
            kwargs["params"] = query
        if json_data is not None:
            kwargs["json"] = json_data

        logger.debug("%s %s", method, path)
        resp = await self._client.request(method, path, **kwargs)

        if resp.status_code in (401, 403):
            raise GitLabAuthError(resp.status_code, resp.text)
        if resp.status_code == 404:
            raise GitLabNotFoundError(resp.text)
        if not resp.is_success:
            raise GitLabApiError(resp.status_code, resp.reason_phrase or "", resp.text)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response, *, raw: bool = False) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None

        if raw:
            return _raw_body(resp)

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response — check URL and authentication"
            raise GitLabApiError(resp.status_code, msg, resp.text[:500])

        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise GitLabApiError(
                resp.status_code,
                f"JSON parse error: {e}",
                resp.text[:500],
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        raw: bool = False,
    ) -> GitLabResponse:
        """Make an API request and keep the pagination headers alongside the body."""
        resp = await self._send(method.upper(), path, json_data=body, params=query)
        return GitLabResponse(
            data=self._decode(resp, raw=raw),
            total=_int_header(resp.headers, "x-total"),
            next_page=_int_header(resp.headers, "x-next-page"),
            headers=dict(resp.headers),
        )
