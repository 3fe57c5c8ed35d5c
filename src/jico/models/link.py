"""
Jira issue link relation model.

Jira stores a link as a typed pair (``inwardIssue``, ``outwardIssue``) and
renders it from the point of view of each side: the issue posted as
``inwardIssue`` shows the type's *outward* description ("blocks"), the
issue posted as ``outwardIssue`` shows the *inward* one ("is blocked by").
"""

from enum import Enum


class LinkRelation(str, Enum):
    """Relation from the issue being linked to the ``--to`` issue."""

    BLOCKS = "blocks"
    BLOCKED_BY = "blocked-by"
    CLONES = "clones"
    IS_CLONED_BY = "is-cloned-by"
    DUPLICATES = "duplicates"
    IS_DUPLICATED_BY = "is-duplicated-by"
    RELATES_TO = "relates-to"

    @classmethod
    def choices(cls) -> list[str]:
        return [relation.value for relation in cls]

    @property
    def link_type_name(self) -> str:
        """Name of the Jira issue link type behind this relation."""
        return _LINK_TYPES[self][0]

    @property
    def source_is_inward(self) -> bool:
        """Whether the source issue is posted as ``inwardIssue``."""
        return _LINK_TYPES[self][1]

    def inward_outward_keys(self, key: str, to: str) -> tuple[str, str]:
        """
        Order two issue keys for the issueLink payload.

        Args:
            key: The issue the command is run against
            to: The other issue

        Returns:
            (inward issue key, outward issue key)
        """
        if self.source_is_inward:
            return key, to
        return to, key


# relation -> (link type name, source issue goes into inwardIssue)
_LINK_TYPES: dict[LinkRelation, tuple[str, bool]] = {
    LinkRelation.BLOCKS: ("Blocks", True),
    LinkRelation.BLOCKED_BY: ("Blocks", False),
    LinkRelation.CLONES: ("Cloners", True),
    LinkRelation.IS_CLONED_BY: ("Cloners", False),
    LinkRelation.DUPLICATES: ("Duplicate", True),
    LinkRelation.IS_DUPLICATED_BY: ("Duplicate", False),
    LinkRelation.RELATES_TO: ("Relates", True),
}
