"""
Display-label helpers for widget rows and tabs.
"""
import re
from datetime import datetime, timezone
from typing import Any, Optional

from .config import KEY_LABEL_MAX, TAB_ITEM_WIDTH, VALUE_LABEL_MAX
from .models import DisplayRow, ListItem

PREFIX_PATTERN = re.compile(r"^event_[^_]+_")
CAPITAL_PATTERN = re.compile(r"([A-Z])")


def truncate_text(text: str, max_length: int) -> str:
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def capitalize(text: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return text[:1].upper() + text[1:]


def item_label(item: Optional[ListItem], max_length: int = KEY_LABEL_MAX) -> str:
    """
    Human-readable label for a row's key.

    "event_auth_failedLoginCount" -> "failed Login Count"
    """
    if item is None or not item.key:
        return ""

    label = PREFIX_PATTERN.sub("", item.key)
    label = CAPITAL_PATTERN.sub(r" \1", label)
    label = truncate_text(label, max_length)
    return label.replace("_", " ")


def value_label(item: Optional[ListItem], max_length: int = VALUE_LABEL_MAX) -> str:
    if item is None:
        return ""
    return truncate_text(item.value, max_length)


def to_display_row(item: ListItem) -> DisplayRow:
    return DisplayRow(
        key=item.key,
        value=item.value,
        is_favorite=item.is_favorite,
        label=item_label(item),
        value_label=value_label(item),
    )


def format_timestamp(value: Any, tz: Optional[timezone] = None) -> str:
    """
    Format a timestamp as HH:MM:SS.

    Args:
        value: ISO-8601 string or epoch milliseconds
        tz: Target timezone for aware timestamps (local time when None)

    Returns:
        "HH:MM:SS", or an empty string when the value cannot be parsed
    """
    try:
        if isinstance(value, bool):
            return ""
        if isinstance(value, (int, float)):
            moment = datetime.fromtimestamp(value / 1000, tz=tz or timezone.utc)
            if tz is None:
                moment = moment.astimezone()
        elif isinstance(value, str):
            moment = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            if moment.tzinfo is not None:
                moment = moment.astimezone(tz)
        else:
            return ""
    except (ValueError, OverflowError, OSError):
        return ""

    return moment.strftime("%H:%M:%S")


def tab_strip_width(event_count: int, item_width: int = TAB_ITEM_WIDTH) -> str:
    """Width of the tab strip: one fixed-width slot per loaded event."""
    return f"{event_count * item_width}px"
