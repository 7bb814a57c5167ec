"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira.utils.date")

SHORT_DATE_FORMAT = "%m/%d/%Y"


def parse_date(date_str: str | None, format_string: str = "%Y-%m-%d") -> str:
    """
    Parse a date string from ISO format to a specified format.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string
        format_string: The output format (default: "%Y-%m-%d")

    Returns:
        Formatted date string, empty string if date_str is empty, or the
        original string if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")

    return date_str


def parse_date_short(date_str: str | None) -> str:
    """
    Parse a date string to the short MM/DD/YYYY form used in issue summaries.

    The date is read in the timezone Jira reported it in.

    Args:
        date_str: The date string to parse or None

    Returns:
        Date in MM/DD/YYYY format or empty string if date_str is None
    """
    return parse_date(date_str, SHORT_DATE_FORMAT)
