"""GitLab MCP server configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_URL = "https://gitlab.com"


def _split_patterns(value: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in value.split(",") if p.strip())


@dataclass
class GitLabConfig:
    """Configuration for the GitLab MCP server, loaded from environment variables."""

    url: str = DEFAULT_URL
    token: str = ""
    read_only: bool = False
    timeout: int = 30
    ssl_verify: bool = True
    tool_patterns: tuple[str, ...] = ()
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> GitLabConfig:
        url = (os.getenv("GITLAB_URL") or DEFAULT_URL).rstrip("/")
        token = (
            os.getenv("GITLAB_TOKEN")
            or os.getenv("GITLAB_PAT")
            or os.getenv("GITLAB_PERSONAL_ACCESS_TOKEN")
            or os.getenv("GITLAB_API_TOKEN", "")
        )
        read_only = os.getenv("GITLAB_READ_ONLY", "false").lower() in (
            "true",
            "1",
            "yes",
        )
        timeout = int(os.getenv("GITLAB_TIMEOUT", "30"))
        ssl_verify = os.getenv("GITLAB_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )
        tool_patterns = _split_patterns(
            os.getenv("GITLAB_TOOLS") or os.getenv("TOOL_GLOB_PATTERNS", "")
        )
        log_level = (os.getenv("GITLAB_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").upper()

        return cls(
            url=url,
            token=token,
            read_only=read_only,
            timeout=timeout,
            ssl_verify=ssl_verify,
            tool_patterns=tool_patterns,
            log_level=log_level,
        )

    @property
    def api_url(self) -> str:
        return f"{self.url}/api/v4"

    def validate(self) -> None:
        if not self.url:
            msg = "GITLAB_URL environment variable is required"
            raise ValueError(msg)
        if not self.token:
            msg = (
                "GitLab token is required. Set one of: GITLAB_TOKEN, GITLAB_PAT, "
                "GITLAB_PERSONAL_ACCESS_TOKEN, or GITLAB_API_TOKEN"
            )
            raise ValueError(msg)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            msg = f"Unknown log level: {self.log_level}"
            raise ValueError(msg)
