"""Exception hierarchy for jico."""

from typing import Any


class JicoError(Exception):
    """Base class for every error jico reports to the user."""


class ConfigError(JicoError):
    """Required configuration is missing or invalid."""


class CommandValidationError(JicoError):
    """Command-line arguments are missing or invalid."""


class NoQueryAvailableError(CommandValidationError):
    """No JQL could be resolved for a list command."""


class JiraTransportError(JicoError):
    """The request never produced an HTTP response (DNS, TLS, connection)."""


class JiraApiError(JicoError):
    """Jira answered with a non-2xx status.

    The decoded response body is kept so it can be printed verbatim.
    """

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class JicoAuthenticationError(JiraApiError):
    """Jira rejected the credentials (401/403)."""


class TransitionError(JicoError):
    """The requested transition could not be resolved to a single id."""

    def __init__(self, message: str, available: list[str] | None = None) -> None:
        super().__init__(message)
        self.available = available or []


class TransitionNotFoundError(TransitionError):
    """No available transition matches the requested name."""


class AmbiguousTransitionError(TransitionError):
    """More than one available transition matches the requested name."""
