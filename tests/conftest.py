"""
Root pytest configuration file for jico tests.
"""

import json
import os
from collections.abc import Callable
from typing import Any
from unittest.mock import patch

import pytest
import requests

BASE_ENV = {
    "JIRA_BASE_URL": "https://test.atlassian.net",
    "JIRA_EMAIL": "test@example.com",
    "JIRA_API_TOKEN": "test_token",
}


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Build real requests.Response objects without any network."""

    def _make(status_code: int = 200, body: Any = None, reason: str = "") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        if body is None:
            response._content = b""
        elif isinstance(body, str):
            response._content = body.encode("utf-8")
        else:
            response._content = json.dumps(body).encode("utf-8")
        response.encoding = "utf-8"
        return response

    return _make


@pytest.fixture
def jira_env(tmp_path, monkeypatch):
    """Minimal Jira environment, isolated from any real .env or JIRA_* variables."""
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, BASE_ENV, clear=True):
        yield
