"""
Default values used when building commands and converting API responses.
"""

EMPTY_STRING = ""

JIRA_DEFAULT_ID = "0"

# Issue type names applied when the user does not pass --issue-type
DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_SUBTASK_TYPE = "Sub-task"

# Number of issues returned by `list` when --limit is not given
DEFAULT_LIST_LIMIT = 20
# Upper bound for --limit; a list is always a single bounded page
MAX_LIST_LIMIT = 100

# Fields requested by `list` when --fields is not given. The search/jql
# endpoint returns only issue ids unless fields are named explicitly.
DEFAULT_LIST_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "assignee",
    "priority",
    "issuetype",
    "created",
    "updated",
)
