"""Request builders: one pure mapping per command to a Jira REST call.

Nothing here touches the network. Every builder returns an ``ApiRequest``
that ``JiraClient.execute`` sends.
"""

from typing import Any

from ..models.commands import (
    CreateCommand,
    IssueFields,
    LinkCommand,
    ListCommand,
    UpdateCommand,
    ViewCommand,
)
from ..models.request import ApiRequest
from .constants import ISSUE_LINK_PATH, ISSUE_PATH, SEARCH_JQL_PATH
from .formatting import text_to_adf


def issue_fields_payload(fields: IssueFields) -> dict[str, Any]:
    """
    Convert IssueFields to the ``fields`` object of a create/edit payload.

    Only fields that are set appear in the result; absent values are never
    sent as null.
    """
    payload: dict[str, Any] = {}
    if fields.project is not None:
        payload["project"] = {"key": fields.project}
    if fields.summary is not None:
        payload["summary"] = fields.summary
    if fields.issue_type is not None:
        payload["issuetype"] = {"name": fields.issue_type}
    if fields.description is not None:
        payload["description"] = text_to_adf(fields.description)
    if fields.parent is not None:
        payload["parent"] = {"key": fields.parent}
    if fields.labels is not None:
        payload["labels"] = list(fields.labels)
    if fields.priority is not None:
        payload["priority"] = {"name": fields.priority}
    if fields.assignee is not None:
        payload["assignee"] = {"accountId": fields.assignee}
    return payload


def build_create_request(command: CreateCommand) -> ApiRequest:
    return ApiRequest(
        method="POST",
        path=ISSUE_PATH,
        body={"fields": issue_fields_payload(command.fields)},
    )


def build_list_request(command: ListCommand) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=SEARCH_JQL_PATH,
        params={
            "jql": command.jql,
            "maxResults": command.limit,
            "fields": ",".join(command.fields),
        },
    )


def build_view_request(command: ViewCommand) -> ApiRequest:
    """Fetch the issue, or only its ``subtasks`` field when subtasks are requested."""
    params = {"fields": "subtasks"} if command.subtasks else None
    return ApiRequest(method="GET", path=issue_path(command.key), params=params)


def build_update_request(command: UpdateCommand) -> ApiRequest:
    return ApiRequest(
        method="PUT",
        path=issue_path(command.key),
        body={"fields": issue_fields_payload(command.fields)},
    )


def build_transitions_request(issue_key: str) -> ApiRequest:
    """List the transitions available from the issue's current status."""
    return ApiRequest(method="GET", path=transitions_path(issue_key))


def build_apply_transition_request(issue_key: str, transition_id: str) -> ApiRequest:
    return ApiRequest(
        method="POST",
        path=transitions_path(issue_key),
        body={"transition": {"id": transition_id}},
    )


def build_link_request(command: LinkCommand) -> ApiRequest:
    inward_key, outward_key = command.relation.inward_outward_keys(
        command.key, command.to
    )
    return ApiRequest(
        method="POST",
        path=ISSUE_LINK_PATH,
        body={
            "type": {"name": command.relation.link_type_name},
            "inwardIssue": {"key": inward_key},
            "outwardIssue": {"key": outward_key},
        },
    )


def issue_path(issue_key: str) -> str:
    return f"{ISSUE_PATH}/{issue_key}"


def transitions_path(issue_key: str) -> str:
    return f"{issue_path(issue_key)}/transitions"
