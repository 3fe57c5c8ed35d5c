"""Test fixtures for Jira unit tests."""

from unittest.mock import MagicMock, patch

import pytest

from jico.jira import JiraFetcher
from jico.jira.config import JiraConfig


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    return MagicMock()


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance whose atlassian client is a mock."""
    with patch("jico.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        fetcher = JiraFetcher(config=mock_config)
        yield fetcher

