"""
Pydantic models for jico.

Command records built from the command line, the request descriptor
produced for each of them, and the few Jira response shapes jico reads.
"""

from .base import ApiModel
from .commands import (
    Command,
    CreateCommand,
    IssueFields,
    LinkCommand,
    ListCommand,
    TransitionCommand,
    UpdateCommand,
    ViewCommand,
)
from .link import LinkRelation
from .request import ApiRequest
from .workflow import JiraTransition

__all__ = [
    "ApiModel",
    "ApiRequest",
    "Command",
    "CreateCommand",
    "IssueFields",
    "JiraTransition",
    "LinkCommand",
    "LinkRelation",
    "ListCommand",
    "TransitionCommand",
    "UpdateCommand",
    "ViewCommand",
]
