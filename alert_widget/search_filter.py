"""
Search/Favorites filter.

Narrows a category's rows by a case-insensitive regular expression matched
against the formatted key or the value, optionally keeps favorites only,
and collapses rows whose formatted key and value are identical.

Search text comes straight from the user, so it may not be a valid pattern.
compile_matcher never raises: an invalid pattern degrades according to the
configured policy:

- "literal": the query is matched as a plain case-insensitive substring
- "none": nothing matches and the "no data!" row is shown
"""
import re
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import INVALID_PATTERN_POLICY
from .content import get_content
from .favorites import FavoritesRegistry
from .models import CategorizedData, ListItem

logger = logging.getLogger(__name__)

CAPITAL_PATTERN = re.compile(r"([A-Z])")

VALID_POLICIES = ("literal", "none")


def format_key(key: str) -> str:
    """Insert a space before every capital letter and trim: "eventAuthUser" -> "event Auth User"."""
    return CAPITAL_PATTERN.sub(r" \1", key).strip()


# =============================================================================
# MATCHERS
# =============================================================================

class Matcher(ABC):
    """Base matcher: decides whether a piece of text satisfies the search query"""
    query: str = ""

    @abstractmethod
    def matches(self, text: str) -> bool:
        pass


class CompiledMatcher(Matcher):
    """Query compiled as a case-insensitive regular expression"""

    def __init__(self, query: str, pattern: "re.Pattern"):
        self.query = query
        self.pattern = pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class LiteralMatcher(Matcher):
    """Fallback for invalid patterns: case-insensitive substring match"""

    def __init__(self, query: str):
        self.query = query
        self._needle = query.casefold()

    def matches(self, text: str) -> bool:
        return self._needle in text.casefold()


class NullMatcher(Matcher):
    """Fallback for invalid patterns: matches nothing"""

    def __init__(self, query: str):
        self.query = query

    def matches(self, text: str) -> bool:
        return False


def compile_matcher(query: str, policy: Optional[str] = None) -> Matcher:
    """
    Compile the search query into a matcher.

    Args:
        query: Raw search text
        policy: Invalid-pattern policy ("literal" or "none"), defaults to config

    Returns:
        CompiledMatcher, or the policy's fallback matcher when the query is
        not a valid regular expression
    """
    policy = (policy or INVALID_PATTERN_POLICY).lower()
    if policy not in VALID_POLICIES:
        logger.warning(f"Unknown invalid-pattern policy '{policy}', using 'literal'")
        policy = "literal"

    try:
        return CompiledMatcher(query, re.compile(query, re.IGNORECASE))
    except re.error as e:
        logger.info(f"Invalid search pattern '{query}' ({e}); falling back to '{policy}'")

    if policy == "none":
        return NullMatcher(query)
    return LiteralMatcher(query)


# =============================================================================
# FILTER
# =============================================================================

def filter_items(
    category: Optional[str],
    categorized_data: CategorizedData,
    favorites: FavoritesRegistry,
    search_query: str = "",
    restrict_to_favorites: bool = False,
    policy: Optional[str] = None
) -> List[ListItem]:
    """
    Filter a category's rows by search query and favorite status.

    Args:
        category: Selected category, or None when no category is selected
        categorized_data: Output of categorize_events
        favorites: Registry consulted for is_favorite
        search_query: Raw search text (case-insensitive regular expression)
        restrict_to_favorites: Keep only favorited rows
        policy: Invalid-pattern policy override

    Returns:
        Matching rows deduplicated on "formatted key:value". When a category
        is selected but nothing matches, a single "no data!" placeholder row.
        An empty list when no category is selected.
    """
    if not category:
        return []

    matcher = compile_matcher(search_query, policy)
    seen = set()
    items = []

    for item in get_content(category, categorized_data, favorites):
        formatted_key = format_key(item.key)
        if not (matcher.matches(formatted_key) or matcher.matches(item.value)):
            continue
        if restrict_to_favorites and not item.is_favorite:
            continue

        item_string = f"{formatted_key}:{item.value}"
        if item_string in seen:
            continue
        seen.add(item_string)
        items.append(item)

    if not items:
        items.append(ListItem.placeholder())

    logger.debug(
        f"Filtered category '{category}' with query '{search_query}' "
        f"(favorites only={restrict_to_favorites}): {len(items)} rows"
    )
    return items
