"""
Content selector: the display-ready rows of one category.
"""
from typing import List

from .exceptions import UnknownCategoryError
from .favorites import FavoritesRegistry
from .models import CategorizedData, ListItem


def get_content(
    category: str,
    categorized_data: CategorizedData,
    favorites: FavoritesRegistry
) -> List[ListItem]:
    """
    Build one row per distinct field key in a category.

    The first occurrence of a key wins; later entries with the same key are
    dropped and first-seen order is preserved. Favorite status is read from
    the registry at call time; the registry is not modified.

    Args:
        category: Category name
        categorized_data: Output of categorize_events
        favorites: Registry consulted for is_favorite

    Returns:
        List of fresh ListItem instances

    Raises:
        UnknownCategoryError: If the category is not in categorized_data
    """
    if category not in categorized_data:
        raise UnknownCategoryError(category)

    seen_keys = set()
    items = []
    for entry in categorized_data[category]:
        if entry.key in seen_keys:
            continue
        seen_keys.add(entry.key)
        items.append(ListItem(
            key=entry.key,
            value=entry.value.text,
            is_favorite=favorites.is_favorite(entry.key)
        ))
    return items
