"""Jira API module for jico.

This module provides the Jira client used by the command line.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .links import LinksMixin
from .search import SearchMixin
from .transitions import TransitionResolver, TransitionsMixin, match_transition


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    TransitionsMixin,
    LinksMixin,
):
    """
    The Jira client class providing one operation per subcommand.

    This class inherits from mixins that provide specific functionality:
    - IssuesMixin: create, view and update
    - SearchMixin: JQL search
    - TransitionsMixin: named status transitions
    - LinksMixin: issue links
    """

    pass


__all__ = [
    "JiraFetcher",
    "JiraConfig",
    "JiraClient",
    "TransitionResolver",
    "match_transition",
]
