"""Constants shared by the Jira operations."""

API_PATH = "/rest/api/3"
AGILE_PATH = "/rest/agile/1.0"

DEFAULT_START_AT = 0
DEFAULT_MAX_RESULTS = 50

DEFAULT_SEARCH_FIELDS = [
    "key",
    "summary",
    "status",
    "assignee",
    "priority",
    "issuetype",
    "updated",
]
