"""Module for Jira issue operations."""

import logging
from typing import Any

from ..models.commands import CreateCommand, UpdateCommand, ViewCommand
from .builders import build_create_request, build_update_request, build_view_request
from .client import JiraClient

logger = logging.getLogger("jico.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def create_issue(self, command: CreateCommand) -> dict[str, Any]:
        """
        Create a new Jira issue.

        Args:
            command: The validated create command

        Returns:
            Jira's response, normally ``{"id", "key", "self"}``
        """
        fields = command.fields
        logger.info(
            f"Creating {fields.issue_type} in project {fields.project}: {fields.summary}"
        )
        return self.execute(build_create_request(command))

    def view_issue(self, command: ViewCommand) -> Any:
        """
        Fetch an issue, or only its sub-tasks.

        With ``command.subtasks`` set, only the ``subtasks`` field of the
        issue is requested and the ordered list it holds is returned instead
        of the issue body. An issue without sub-tasks yields ``[]``.
        """
        response = self.execute(build_view_request(command))
        if not command.subtasks:
            return response

        fields = response.get("fields") if isinstance(response, dict) else None
        subtasks = (fields or {}).get("subtasks") or []
        logger.debug(f"{command.key} has {len(subtasks)} sub-task(s)")
        return subtasks

    def update_issue(self, command: UpdateCommand) -> Any:
        """
        Update only the fields set on the command.

        Fields the user did not pass are left out of the payload, so Jira
        keeps their current values.

        Returns:
            Jira's response; an empty dict for the usual 204
        """
        changed = sorted(command.fields.model_dump(exclude_none=True))
        logger.info(f"Updating {command.key}: {', '.join(changed)}")
        return self.execute(build_update_request(command))
