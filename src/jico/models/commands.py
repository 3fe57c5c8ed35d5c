"""
Typed commands built from the command line.

Each subcommand produces exactly one of these records. Defaults taken from
the configuration (project key, default JQL) are applied by the
``from_options`` constructors, so a command that exists is complete and
valid: nothing downstream re-checks required arguments.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import CommandValidationError, NoQueryAvailableError
from .constants import (
    DEFAULT_ISSUE_TYPE,
    DEFAULT_LIST_FIELDS,
    DEFAULT_LIST_LIMIT,
    DEFAULT_SUBTASK_TYPE,
    MAX_LIST_LIMIT,
)
from .link import LinkRelation

if TYPE_CHECKING:
    from ..jira.config import JiraConfig

C = TypeVar("C", bound="Command")


class IssueFields(BaseModel):
    """Issue fields a user can set on create or update. Unset means absent."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    summary: str | None = None
    description: str | None = None
    project: str | None = None
    issue_type: str | None = None
    parent: str | None = None
    labels: list[str] | None = None
    priority: str | None = None
    assignee: str | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class Command(BaseModel):
    """Base class for the six subcommand records."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def build(cls: type[C], **data: Any) -> C:
        """Construct the command, turning pydantic errors into CommandValidationError."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise CommandValidationError(_first_error_message(e)) from e


class CreateCommand(Command):
    fields: IssueFields

    @model_validator(mode="after")
    def _check_required(self) -> "CreateCommand":
        if not self.fields.summary:
            raise ValueError("summary is required")
        if not self.fields.project:
            raise ValueError(
                "project key is required (pass --project or set JIRA_PROJECT_KEY)"
            )
        if not self.fields.issue_type:
            raise ValueError("issue type is required")
        return self

    @classmethod
    def from_options(
        cls,
        config: "JiraConfig",
        summary: str,
        project: str | None = None,
        issue_type: str | None = None,
        parent: str | None = None,
        **optional: Any,
    ) -> "CreateCommand":
        """
        Build a create command, applying project and issue type defaults.

        Args:
            config: Resolved configuration, consulted for the default project
            summary: Issue summary
            project: Explicit project key, overrides the configured one
            issue_type: Explicit issue type; defaults to Task, or Sub-task
                when a parent is given
            parent: Parent issue key for sub-tasks
            **optional: description, labels, priority, assignee

        Raises:
            CommandValidationError: If summary or project cannot be resolved
        """
        if not issue_type:
            issue_type = DEFAULT_SUBTASK_TYPE if parent else DEFAULT_ISSUE_TYPE
        return cls.build(
            fields={
                "summary": summary,
                "project": project or config.project_key,
                "issue_type": issue_type,
                "parent": parent,
                **optional,
            }
        )


class ListCommand(Command):
    jql: str = Field(min_length=1)
    limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=1, le=MAX_LIST_LIMIT)
    fields: list[str] = Field(default_factory=lambda: list(DEFAULT_LIST_FIELDS))

    @classmethod
    def from_options(
        cls,
        config: "JiraConfig",
        jql: str | None = None,
        project: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
        fields: list[str] | None = None,
    ) -> "ListCommand":
        data: dict[str, Any] = {"jql": resolve_jql(config, jql, project), "limit": limit}
        if fields:
            data["fields"] = fields
        return cls.build(**data)


class ViewCommand(Command):
    key: str = Field(min_length=1)
    subtasks: bool = False


class UpdateCommand(Command):
    key: str = Field(min_length=1)
    fields: IssueFields

    @model_validator(mode="after")
    def _check_fields(self) -> "UpdateCommand":
        if self.fields.is_empty():
            raise ValueError(
                "no fields to update (pass at least one of --summary, --description, "
                "--project, --issue-type, --parent, --labels, --priority, --assignee)"
            )
        return self

    @classmethod
    def from_options(cls, key: str, **options: Any) -> "UpdateCommand":
        """Build an update command; a new parent implies the Sub-task type."""
        if options.get("parent") and not options.get("issue_type"):
            options["issue_type"] = DEFAULT_SUBTASK_TYPE
        return cls.build(key=key, fields=options)


class TransitionCommand(Command):
    key: str = Field(min_length=1)
    to: str = Field(min_length=1)


class LinkCommand(Command):
    key: str = Field(min_length=1)
    to: str = Field(min_length=1)
    relation: LinkRelation = LinkRelation.BLOCKS

    @field_validator("relation", mode="before")
    @classmethod
    def _known_relation(cls, value: Any) -> Any:
        if value is None:
            return LinkRelation.BLOCKS
        if isinstance(value, LinkRelation):
            return value
        if str(value).lower() not in LinkRelation.choices():
            raise ValueError(
                f"unknown relation '{value}' "
                f"(expected one of: {', '.join(LinkRelation.choices())})"
            )
        return str(value).lower()


def resolve_jql(
    config: "JiraConfig", jql: str | None = None, project: str | None = None
) -> str:
    """
    Pick the JQL for a list command.

    Precedence: explicit ``--jql``, then the configured default JQL, then
    ``project = KEY ORDER BY created DESC`` for the explicit or configured
    project key.

    Raises:
        NoQueryAvailableError: If none of the three is available
    """
    if jql:
        return jql
    if config.default_jql:
        return config.default_jql
    project_key = project or config.project_key
    if project_key:
        return f"project = {project_key} ORDER BY created DESC"
    raise NoQueryAvailableError(
        "no query available (pass --jql or --project, or set JIRA_DEFAULT_JQL "
        "or JIRA_PROJECT_KEY)"
    )


def _first_error_message(error: ValidationError) -> str:
    details = error.errors()[0]
    ctx_error = details.get("ctx", {}).get("error")
    if isinstance(ctx_error, ValueError):
        return str(ctx_error)
    location = ".".join(str(part) for part in details.get("loc", ()))
    if location:
        return f"{location}: {details['msg']}"
    return details["msg"]
