"""Module for Jira issue link operations."""

import logging
from typing import Any

from ..models.commands import LinkCommand
from .builders import build_link_request
from .client import JiraClient

logger = logging.getLogger("jico.jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def link_issues(self, command: LinkCommand) -> Any:
        """
        Create a link between two issues.

        Args:
            command: The link command; its relation decides the link type and
                which issue is sent as inward and which as outward

        Returns:
            Jira's response; an empty dict for the usual 201 without body
        """
        logger.info(f"Linking {command.key} {command.relation.value} {command.to}")
        return self.execute(build_link_request(command))
