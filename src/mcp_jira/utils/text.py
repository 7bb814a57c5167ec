"""Text helpers for Jira field values."""

import re

TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_html_tags(text: str) -> str:
    """Remove angle-bracket markup and surrounding whitespace.

    Entities are left untouched; only the tags themselves go.
    """
    return TAG_PATTERN.sub("", text).strip()
