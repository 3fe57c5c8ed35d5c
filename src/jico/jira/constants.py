"""Constants specific to Jira operations."""

# REST API v3 resource paths, relative to the base URL
ISSUE_PATH = "rest/api/3/issue"
ISSUE_LINK_PATH = "rest/api/3/issueLink"
SEARCH_JQL_PATH = "rest/api/3/search/jql"
