"""Module for Jira transition operations.

Moving an issue to a named status takes two calls: the transitions that
are available depend on the issue's current status, so they are fetched
first and the requested name is resolved against them before the matching
transition id is applied.
"""

import logging
from enum import Enum
from typing import Any

from ..exceptions import AmbiguousTransitionError, TransitionNotFoundError
from ..models.commands import TransitionCommand
from ..models.workflow import JiraTransition
from .builders import build_apply_transition_request, build_transitions_request
from .client import JiraClient

logger = logging.getLogger("jico.jira")


class TransitionStep(Enum):
    FETCH = "fetch"
    MATCH = "match"
    APPLY = "apply"
    DONE = "done"


def match_transition(candidates: list[JiraTransition], target: str) -> JiraTransition:
    """
    Resolve a transition name against the available candidates.

    Matching is exact but case-insensitive: "in progress" matches
    "In Progress", "progress" does not.

    Args:
        candidates: Transitions available for the issue
        target: Name requested by the user

    Returns:
        The single matching transition

    Raises:
        TransitionNotFoundError: If nothing matches
        AmbiguousTransitionError: If more than one candidate matches
    """
    wanted = target.casefold()
    matches = [c for c in candidates if c.name.casefold() == wanted]
    available = [c.name for c in candidates]

    if not matches:
        raise TransitionNotFoundError(
            f"no such transition from current status: '{target}' "
            f"(available: {', '.join(available) or 'none'})",
            available,
        )
    if len(matches) > 1:
        ids = ", ".join(f"{m.id} ({m.name})" for m in matches)
        raise AmbiguousTransitionError(
            f"transition name '{target}' is ambiguous, it matches: {ids}",
            available,
        )
    return matches[0]


class TransitionResolver:
    """
    Fetch → match → apply for one issue and one requested transition name.

    Each step can only run after the previous one succeeded. A failed
    fetch leaves the resolver in FETCH, a failed match in MATCH; nothing
    is ever retried.
    """

    def __init__(self, client: JiraClient, issue_key: str, target: str) -> None:
        self.client = client
        self.issue_key = issue_key
        self.target = target
        self.step = TransitionStep.FETCH
        self.candidates: list[JiraTransition] = []
        self.selected: JiraTransition | None = None

    def fetch(self) -> list[JiraTransition]:
        self._expect(TransitionStep.FETCH)
        response = self.client.execute(build_transitions_request(self.issue_key))
        self.candidates = JiraTransition.list_from_api_response(response)
        logger.debug(
            f"Transitions available for {self.issue_key}: "
            f"{', '.join(f'{t.id} ({t.name})' for t in self.candidates)}"
        )
        self.step = TransitionStep.MATCH
        return self.candidates

    def match(self) -> JiraTransition:
        self._expect(TransitionStep.MATCH)
        self.selected = match_transition(self.candidates, self.target)
        self.step = TransitionStep.APPLY
        return self.selected

    def apply(self) -> Any:
        self._expect(TransitionStep.APPLY)
        assert self.selected is not None
        logger.info(
            f"Transitioning issue {self.issue_key} with transition ID "
            f"{self.selected.id} ({self.selected.name})"
        )
        result = self.client.execute(
            build_apply_transition_request(self.issue_key, self.selected.id)
        )
        self.step = TransitionStep.DONE
        return result

    def run(self) -> Any:
        self.fetch()
        self.match()
        return self.apply()

    def _expect(self, step: TransitionStep) -> None:
        if self.step is not step:
            raise RuntimeError(
                f"cannot run the {step.value} step while at {self.step.value}"
            )


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def transition_issue(self, command: TransitionCommand) -> Any:
        """
        Move an issue through the transition named by ``command.to``.

        Returns:
            Jira's response to the apply call; an empty dict for the usual 204
        """
        return TransitionResolver(self, command.key, command.to).run()
