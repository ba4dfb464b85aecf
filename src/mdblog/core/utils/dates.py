"""Lenient calendar-date parsing for ordering posts"""

from datetime import datetime, timezone
from typing import Any, Optional


DATE_FORMATS = (
    "%B %d, %Y",     # April 30, 2025
    "%b %d, %Y",     # Apr 30, 2025
    "%d %B %Y",      # 30 April 2025
    "%d %b %Y",
    "%Y/%m/%d",
)


def parse_post_date(value: Any) -> Optional[datetime]:
    """Parse a frontmatter date into a naive datetime, or None if unrecognized."""
    if isinstance(value, datetime):
        parsed = value
    elif not isinstance(value, str) or not value.strip():
        return None
    else:
        parsed = _parse_text(value.strip())
        if parsed is None:
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_text(text: str) -> Optional[datetime]:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def date_sort_key(value: Any) -> tuple[bool, datetime]:
    """Key for a descending sort: valid dates first (newest first), unparseable dates last."""
    parsed = parse_post_date(value)
    return (parsed is not None, parsed or datetime.min)
