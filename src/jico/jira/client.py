"""Base client module for Jira API interactions."""

import logging
from typing import Any

import requests
from atlassian import Jira

from ..exceptions import JicoAuthenticationError, JiraApiError, JiraTransportError
from ..models.request import ApiRequest
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jico.jira")


class JiraClient:
    """Base client for Jira API interactions.

    Executes the requests described by the request builders. Requests go
    through ``atlassian.Jira`` in advanced mode so error responses come back
    untouched and can be shown to the user as Jira sent them.
    """

    config: JiraConfig

    def __init__(self, config: JiraConfig) -> None:
        """Initialize the Jira client.

        Args:
            config: Resolved configuration
        """
        self.config = config
        self.jira = Jira(
            url=self.config.url,
            username=self.config.email,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
        )

    def execute(self, request: ApiRequest) -> Any:
        """
        Send one request and return the decoded response body.

        Args:
            request: The request descriptor to send

        Returns:
            The decoded JSON body, or an empty dict for empty 2xx responses

        Raises:
            JiraTransportError: If no HTTP response was received
            JicoAuthenticationError: If Jira answered 401 or 403
            JiraApiError: If Jira answered with any other non-2xx status
        """
        logger.debug(f"{request.method} {request.path} params={request.params}")
        try:
            response = self.jira.request(
                method=request.method,
                path=request.path,
                data=request.body,
                params=request.params,
                advanced_mode=True,
            )
        except requests.exceptions.RequestException as e:
            error_msg = f"Failed to send {request.method} {request.path}: {e}"
            logger.error(error_msg)
            raise JiraTransportError(error_msg) from e

        body = _decode_body(response)
        if not response.ok:
            status_code = response.status_code
            if status_code in (401, 403):
                error_msg = (
                    f"Authentication failed for Jira API ({status_code}). "
                    "Token may be expired or invalid. Please verify credentials."
                )
                logger.error(error_msg)
                raise JicoAuthenticationError(error_msg, status_code, body)
            error_msg = f"Jira returned error status {status_code} {response.reason or ''}"
            logger.debug(f"{error_msg.strip()} for {request.method} {request.path}")
            raise JiraApiError(error_msg.strip(), status_code, body)

        return {} if body is None else body


def _decode_body(response: requests.Response) -> Any:
    """Decode a response body as JSON, falling back to text; None when empty."""
    if not response.content or not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
