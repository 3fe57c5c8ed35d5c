"""Tests for the jico command-line interface."""

import json
from unittest.mock import patch

import pytest
import requests
from click.testing import CliRunner

from jico import __version__, main
from jico.cli import split_labels

TRANSITIONS_RESPONSE = {
    "transitions": [
        {"id": "1", "name": "To Do"},
        {"id": "2", "name": "In Progress"},
        {"id": "3", "name": "Done"},
    ]
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def atlassian(jira_env):
    """The atlassian.Jira instance every command talks to."""
    with patch("jico.jira.client.Jira") as mock_jira_class:
        yield mock_jira_class.return_value


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_create_prints_response(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(
        201, {"id": "10000", "key": "ACME-1", "self": "https://test.atlassian.net/x"}
    )

    result = runner.invoke(
        main,
        ["create", "Fix login", "--project", "ACME", "--labels", "bug, ui", "--priority", "High"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["key"] == "ACME-1"
    fields = atlassian.request.call_args.kwargs["data"]["fields"]
    assert fields["labels"] == ["bug", "ui"]
    assert fields["priority"] == {"name": "High"}
    assert fields["issuetype"] == {"name": "Task"}
    assert "parent" not in fields


def test_create_without_project(runner, atlassian):
    result = runner.invoke(main, ["create", "Fix login"])

    assert result.exit_code == 2
    assert "project key is required" in result.stderr
    atlassian.request.assert_not_called()


def test_create_uses_configured_project(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(201, {"key": "ENV-1"})

    result = runner.invoke(
        main, ["create", "Fix login"], env={"JIRA_PROJECT_KEY": "ENV"}
    )

    assert result.exit_code == 0, result.output
    fields = atlassian.request.call_args.kwargs["data"]["fields"]
    assert fields["project"] == {"key": "ENV"}


def test_update_without_fields(runner, atlassian):
    result = runner.invoke(main, ["update", "ACME-1"])

    assert result.exit_code == 2
    assert "no fields to update" in result.stderr
    atlassian.request.assert_not_called()


def test_update_sends_only_given_fields(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(204)

    result = runner.invoke(main, ["update", "ACME-2", "--summary", "Another summary"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {}
    kwargs = atlassian.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["data"] == {"fields": {"summary": "Another summary"}}


def test_link_unknown_relation(runner, atlassian):
    result = runner.invoke(main, ["link", "MG-3", "--to", "MG-26", "--relation", "depends-on"])

    assert result.exit_code == 2
    assert "unknown relation" in result.stderr
    atlassian.request.assert_not_called()


def test_link_default_relation(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(201)

    result = runner.invoke(main, ["link", "MG-3", "--to", "MG-26"])

    assert result.exit_code == 0, result.output
    assert atlassian.request.call_args.kwargs["data"] == {
        "type": {"name": "Blocks"},
        "inwardIssue": {"key": "MG-3"},
        "outwardIssue": {"key": "MG-26"},
    }


def test_link_requires_target(runner, atlassian):
    result = runner.invoke(main, ["link", "MG-3"])

    assert result.exit_code == 2
    atlassian.request.assert_not_called()


def test_missing_config(runner, atlassian):
    result = runner.invoke(main, ["view", "ACME-1"], env={"JIRA_EMAIL": None})

    assert result.exit_code == 1
    assert "Missing JIRA_EMAIL" in result.stderr
    atlassian.request.assert_not_called()


def test_env_file_option(runner, atlassian, make_response, tmp_path):
    env_file = tmp_path / "jira.env"
    env_file.write_text("JIRA_PROJECT_KEY=FILE\n")
    atlassian.request.return_value = make_response(200, {"issues": []})

    result = runner.invoke(main, ["--env-file", str(env_file), "list"])

    assert result.exit_code == 0, result.output
    params = atlassian.request.call_args.kwargs["params"]
    assert params["jql"] == "project = FILE ORDER BY created DESC"


def test_api_error_prints_body(runner, atlassian, make_response):
    error_body = {"errorMessages": [], "errors": {"summary": "Field is required"}}
    atlassian.request.return_value = make_response(400, error_body, "Bad Request")

    result = runner.invoke(main, ["view", "ACME-1"])

    assert result.exit_code == 1
    assert json.loads(result.stdout) == error_body
    assert "Jira returned error status 400" in result.stderr


def test_transport_error(runner, atlassian):
    atlassian.request.side_effect = requests.exceptions.ConnectionError("DNS failure")

    result = runner.invoke(main, ["view", "ACME-1"])

    assert result.exit_code == 1
    assert "DNS failure" in result.stderr
    assert result.stdout == ""


def test_view_subtasks(runner, atlassian, make_response):
    subtasks = [{"key": "ACME-2"}, {"key": "ACME-3"}]
    atlassian.request.return_value = make_response(
        200, {"key": "ACME-1", "fields": {"subtasks": subtasks}}
    )

    result = runner.invoke(main, ["view", "ACME-1", "--subtasks"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == subtasks
    assert atlassian.request.call_args.kwargs["params"] == {"fields": "subtasks"}


def test_list_with_default_jql(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(200, {"issues": []})

    result = runner.invoke(
        main,
        ["list", "--limit", "5", "--fields", "summary,status"],
        env={"JIRA_DEFAULT_JQL": "assignee = currentUser()"},
    )

    assert result.exit_code == 0, result.output
    params = atlassian.request.call_args.kwargs["params"]
    assert params == {
        "jql": "assignee = currentUser()",
        "maxResults": 5,
        "fields": "summary,status",
    }


def test_list_without_query(runner, atlassian):
    result = runner.invoke(main, ["list"])

    assert result.exit_code == 2
    assert "no query available" in result.stderr
    atlassian.request.assert_not_called()


def test_list_limit_out_of_range(runner, atlassian):
    result = runner.invoke(main, ["list", "--jql", "project = ACME", "--limit", "500"])

    assert result.exit_code == 2
    atlassian.request.assert_not_called()


def test_transition(runner, atlassian, make_response):
    atlassian.request.side_effect = [
        make_response(200, TRANSITIONS_RESPONSE),
        make_response(204),
    ]

    result = runner.invoke(main, ["transition", "PROJ-123", "--to", "in progress"])

    assert result.exit_code == 0, result.output
    apply_call = atlassian.request.call_args_list[1].kwargs
    assert apply_call["data"] == {"transition": {"id": "2"}}


def test_transition_not_found(runner, atlassian, make_response):
    atlassian.request.return_value = make_response(200, TRANSITIONS_RESPONSE)

    result = runner.invoke(main, ["transition", "PROJ-123", "--to", "progress"])

    assert result.exit_code == 1
    assert "no such transition from current status" in result.stderr
    assert "To Do, In Progress, Done" in result.stderr
    assert atlassian.request.call_count == 1


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ((), None),
        (("bug,ui",), ["bug", "ui"]),
        (("bug", " ui , backend "), ["bug", "ui", "backend"]),
        (("",), []),
    ],
)
def test_split_labels(values, expected):
    assert split_labels(values) == expected
