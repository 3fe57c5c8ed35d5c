"""Outbound request descriptor produced by the request builders."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ApiRequest(BaseModel):
    """
    A single Jira REST call, described but not executed.

    ``path`` is relative to the configured base URL.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "PUT"]
    path: str
    body: dict[str, Any] | None = None
    params: dict[str, Any] | None = None
