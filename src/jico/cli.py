"""Command-line interface: one click subcommand per Jira operation."""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import click

from . import __version__
from .exceptions import (
    CommandValidationError,
    ConfigError,
    JiraApiError,
    JiraTransportError,
    TransitionError,
)
from .jira import JiraConfig, JiraFetcher
from .models import (
    Command,
    CreateCommand,
    LinkCommand,
    LinkRelation,
    ListCommand,
    TransitionCommand,
    UpdateCommand,
    ViewCommand,
)
from .models.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from .utils.logging import level_from_verbosity, setup_logging
from .utils.output import print_api_error, print_json

logger = logging.getLogger("jico")


@dataclass
class CliState:
    """Options of the top-level group, shared with every subcommand."""

    env_file: str | None = None


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="jico")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to .env file (default: .env in the current directory)",
)
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None) -> None:
    """jico - CLI helper for Jira Cloud

    Reads JIRA_BASE_URL, JIRA_EMAIL and JIRA_API_TOKEN (plus the optional
    JIRA_PROJECT_KEY and JIRA_DEFAULT_JQL) from the environment or a .env
    file and prints Jira's JSON responses.
    """
    level = level_from_verbosity(
        verbose, _env_flag("JICO_VERY_VERBOSE"), _env_flag("JICO_VERBOSE")
    )
    setup_logging(level)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")
    ctx.obj = CliState(env_file=env_file)


def dispatch(fetcher: JiraFetcher, command: Command) -> Any:
    """Run the operation that handles ``command``."""
    handlers: dict[type[Command], Callable[[Any], Any]] = {
        CreateCommand: fetcher.create_issue,
        ListCommand: fetcher.search_issues,
        ViewCommand: fetcher.view_issue,
        UpdateCommand: fetcher.update_issue,
        TransitionCommand: fetcher.transition_issue,
        LinkCommand: fetcher.link_issues,
    }
    return handlers[type(command)](command)


def run_command(ctx: click.Context, build: Callable[[JiraConfig], Command]) -> None:
    """
    Load the configuration, build the command, run it and print the result.

    Validation problems exit with status 2, everything else that fails
    exits with status 1. Jira error bodies are printed before exiting.
    """
    state: CliState = ctx.find_object(CliState) or CliState()
    try:
        config = JiraConfig.from_env(env_file=state.env_file)
        command = build(config)
        result = dispatch(JiraFetcher(config), command)
    except CommandValidationError as e:
        raise click.UsageError(str(e), ctx) from e
    except JiraApiError as e:
        print_api_error(e)
        ctx.exit(1)
    except (ConfigError, JiraTransportError, TransitionError) as e:
        raise click.ClickException(str(e)) from e
    else:
        print_json(result)


def split_labels(values: tuple[str, ...]) -> list[str] | None:
    """Flatten repeated and comma-separated --labels values; None when not given."""
    if not values:
        return None
    return [
        label.strip() for value in values for label in value.split(",") if label.strip()
    ]


def issue_field_options(func: Callable) -> Callable:
    """Options shared by create and update for the optional issue fields."""
    options = [
        click.option("--description", help="Description (plain text)"),
        click.option("--issue-type", help="Issue type name"),
        click.option("--parent", help="Parent issue key (makes the issue a sub-task)"),
        click.option(
            "--labels",
            multiple=True,
            help="Labels to set (comma-separated or repeated)",
        ),
        click.option("--priority", help="Priority name"),
        click.option("--assignee", help="Assignee accountId"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@main.command()
@click.argument("summary")
@click.option("--project", help="Project key; falls back to JIRA_PROJECT_KEY")
@issue_field_options
@click.pass_context
def create(
    ctx: click.Context,
    summary: str,
    project: str | None,
    description: str | None,
    issue_type: str | None,
    parent: str | None,
    labels: tuple[str, ...],
    priority: str | None,
    assignee: str | None,
) -> None:
    """Create a new issue.

    The issue type defaults to Task, or Sub-task when --parent is given.
    """
    run_command(
        ctx,
        lambda config: CreateCommand.from_options(
            config,
            summary,
            project=project,
            issue_type=issue_type,
            parent=parent,
            description=description,
            labels=split_labels(labels),
            priority=priority,
            assignee=assignee,
        ),
    )


@main.command("list")
@click.option("--jql", help="JQL query; overrides JIRA_DEFAULT_JQL")
@click.option(
    "--project",
    help="Project key used to build the query when no JQL is available",
)
@click.option(
    "--limit",
    type=click.IntRange(1, MAX_LIST_LIMIT),
    default=DEFAULT_LIST_LIMIT,
    show_default=True,
    help="Maximum number of issues to return",
)
@click.option("--fields", help="Comma-separated fields to return")
@click.pass_context
def list_issues(
    ctx: click.Context,
    jql: str | None,
    project: str | None,
    limit: int,
    fields: str | None,
) -> None:
    """List issues matching a JQL query.

    The query is --jql, else JIRA_DEFAULT_JQL, else
    "project = KEY ORDER BY created DESC" for --project or JIRA_PROJECT_KEY.
    """
    field_list = [f.strip() for f in fields.split(",") if f.strip()] if fields else None
    run_command(
        ctx,
        lambda config: ListCommand.from_options(
            config, jql=jql, project=project, limit=limit, fields=field_list
        ),
    )


@main.command()
@click.argument("key")
@click.option("--subtasks", is_flag=True, help="Show only the issue's sub-tasks")
@click.pass_context
def view(ctx: click.Context, key: str, subtasks: bool) -> None:
    """Show a single issue, e.g. PROJ-123."""
    run_command(ctx, lambda config: ViewCommand.build(key=key, subtasks=subtasks))


@main.command()
@click.argument("key")
@click.option("--summary", help="New summary")
@click.option("--project", help="Move the issue to another project")
@issue_field_options
@click.pass_context
def update(
    ctx: click.Context,
    key: str,
    summary: str | None,
    project: str | None,
    description: str | None,
    issue_type: str | None,
    parent: str | None,
    labels: tuple[str, ...],
    priority: str | None,
    assignee: str | None,
) -> None:
    """Update fields of an issue. Fields not given are left unchanged."""
    run_command(
        ctx,
        lambda config: UpdateCommand.from_options(
            key,
            summary=summary,
            project=project,
            description=description,
            issue_type=issue_type,
            parent=parent,
            labels=split_labels(labels),
            priority=priority,
            assignee=assignee,
        ),
    )


@main.command()
@click.argument("key")
@click.option("--to", "to", required=True, help="Target transition/status name")
@click.pass_context
def transition(ctx: click.Context, key: str, to: str) -> None:
    """Move an issue through a workflow transition, matched by name."""
    run_command(ctx, lambda config: TransitionCommand.build(key=key, to=to))


@main.command()
@click.argument("key")
@click.option("--to", "to", required=True, help="Target issue key, e.g. PROJ-456")
@click.option(
    "--relation",
    default=LinkRelation.BLOCKS.value,
    show_default=True,
    help=f"Relation from KEY to the target ({', '.join(LinkRelation.choices())})",
)
@click.pass_context
def link(ctx: click.Context, key: str, to: str, relation: str) -> None:
    """Link two issues."""
    run_command(
        ctx, lambda config: LinkCommand.build(key=key, to=to, relation=relation)
    )
