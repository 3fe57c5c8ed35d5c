"""Printing of Jira responses."""

import json
from typing import Any

import click

from ..exceptions import JiraApiError


def format_json(value: Any) -> str:
    """Pretty-print a decoded body, keeping the key order Jira sent."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def print_json(value: Any) -> None:
    click.echo(format_json(value))


def print_api_error(error: JiraApiError) -> None:
    """
    Show a Jira error response.

    The status line goes to stderr; the body Jira sent goes to stdout
    unchanged, like a successful response would.
    """
    click.echo(f"Error: {error}", err=True)
    if error.body is not None:
        print_json(error.body)
