"""
Default values substituted when a Jira response omits a field.
"""

EMPTY_STRING = ""

NO_SUMMARY = "No summary"
NO_DESCRIPTION = "No description"
UNKNOWN_STATUS = "Unknown status"
UNASSIGNED = "Unassigned"
UNKNOWN_REPORTER = "Unknown reporter"
NO_PRIORITY = "No priority"
UNKNOWN_TYPE = "Unknown type"
UNKNOWN_DATE = "Unknown"
