"""
Categorizer: groups raw event fields by the category embedded in their key.

Field keys follow the convention ``event_<category>_<rest>``; the category
is the first underscore-delimited segment after ``event_``. Keys that do not
follow it are left out of every category.
"""
import re
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .exceptions import EventFormatError
from .models import CategorizedData, Event, FieldEntry

logger = logging.getLogger(__name__)

CATEGORY_PATTERN = re.compile(r"^event_([^_]+)_")


def extract_category(key: str) -> Optional[str]:
    """
    Extract the category name from a field key.

    Args:
        key: Raw field key, e.g. "event_auth_user"

    Returns:
        The category ("auth") or None if the key does not match the convention
    """
    match = CATEGORY_PATTERN.match(key)
    if match and match.group(1):
        return match.group(1)
    return None


def parse_events(records: Iterable[Any]) -> List[Event]:
    """
    Validate the wire records of an Events array.

    Malformed records abort the whole parse: no partially categorized data
    is ever produced.

    Args:
        records: Elements of the document's Events array

    Returns:
        List of Event models in input order

    Raises:
        EventFormatError: If any record is not an object, lacks _rawDataFields,
            or holds a non-primitive field value
    """
    events = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise EventFormatError(
                f"Event {index} is malformed: expected an object, got {type(record).__name__}",
                index=index,
            )
        try:
            events.append(Event.model_validate(record))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or '_rawDataFields'}: {err['msg']}"
                for err in e.errors()
            )
            raise EventFormatError(
                f"Event {index} is malformed (_rawDataFields): {problems}",
                index=index,
            ) from e

    logger.debug(f"Parsed {len(events)} events")
    return events


def categorize_events(events: Iterable[Event]) -> CategorizedData:
    """
    Build the category -> field entries mapping.

    Entries are appended in event-then-field-key order. The same key appears
    once per event that contains it; deduplication is left to the content
    selector.

    Args:
        events: Parsed events

    Returns:
        Dict mapping category name to its list of FieldEntry, categories in
        first-seen order
    """
    categorized: Dict[str, List[FieldEntry]] = {}
    skipped = 0

    for event in events:
        for key, value in event.raw_data_fields.items():
            category = extract_category(key)
            if category is None:
                skipped += 1
                continue
            categorized.setdefault(category, []).append(FieldEntry(key=key, value=value))

    logger.info(
        f"Categorized fields into {len(categorized)} categories "
        f"({skipped} fields without a category)"
    )
    return categorized
