"""Shared test fixtures for gitlab-mcp-server."""

from __future__ import annotations

import pytest
import respx

from gitlab_mcp_server.client import GitLabClient
from gitlab_mcp_server.config import GitLabConfig

TEST_URL = "https://gitlab.example.com"
TEST_TOKEN = "test-token"


@pytest.fixture
def config() -> GitLabConfig:
    return GitLabConfig(url=TEST_URL, token=TEST_TOKEN)


@pytest.fixture
def client(config: GitLabConfig) -> GitLabClient:
    return GitLabClient(config)


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=f"{TEST_URL}/api/v4") as router:
        yield router
