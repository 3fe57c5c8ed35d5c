"""Module for Jira search operations."""

import logging
from typing import Any

from ..models.commands import ListCommand
from .builders import build_list_request
from .client import JiraClient

logger = logging.getLogger("jico.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(self, command: ListCommand) -> Any:
        """
        Run a JQL search and return a single page of results.

        Args:
            command: The list command carrying the resolved JQL and limit

        Returns:
            Jira's search response as received
        """
        logger.info(f"Searching issues (limit {command.limit}): {command.jql}")
        return self.execute(build_list_request(command))
