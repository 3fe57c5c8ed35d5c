"""
Jira workflow models.

This module provides the Pydantic model for the transitions Jira reports
as available for an issue in its current status.
"""

import logging
from typing import Any

from .base import ApiModel
from .constants import EMPTY_STRING, JIRA_DEFAULT_ID

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing one available transition of a Jira issue.

    Only the name and the opaque id matter for resolving a transition;
    the target status name is kept for diagnostics.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: One entry of the ``transitions`` array

        Returns:
            A JiraTransition instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        to_status = None
        if to := data.get("to"):
            if isinstance(to, dict):
                to_status = to.get("name")

        # Jira sends ids as strings, but be lenient with ints
        transition_id = data.get("id", JIRA_DEFAULT_ID)
        if transition_id is not None:
            transition_id = str(transition_id)

        return cls(
            id=transition_id,
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
        )

    @classmethod
    def list_from_api_response(cls, data: Any) -> list["JiraTransition"]:
        """Parse the body of ``GET issue/{key}/transitions``."""
        if isinstance(data, dict):
            entries = data.get("transitions") or []
        elif isinstance(data, list):
            entries = data
        else:
            entries = []
        return [cls.from_api_response(entry) for entry in entries if entry]
