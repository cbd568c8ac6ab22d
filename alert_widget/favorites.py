"""
Favorites registry: the set of field keys a user has marked as favorite.

Favorites are tracked by field key, not by row, so every row showing the
same key shares its favorite status. The registry lives only as long as the
widget that owns it.
"""
import logging
from typing import Iterable, Iterator, Set

from .models import ListItem

logger = logging.getLogger(__name__)


class FavoritesRegistry:
    """Process-local set of favorited field keys"""

    def __init__(self, keys: Iterable[str] = ()):
        self._keys: Set[str] = set(keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def is_favorite(self, key: str) -> bool:
        return key in self._keys

    def add(self, key: str) -> None:
        self._keys.add(key)

    def discard(self, key: str) -> None:
        self._keys.discard(key)

    def toggle(self, item: ListItem) -> bool:
        """
        Invert an item's favorite status and record the new status by key.

        Args:
            item: The displayed row being toggled (mutated in place)

        Returns:
            The item's new favorite status
        """
        if item.is_favorite:
            self._keys.discard(item.key)
        else:
            self._keys.add(item.key)
        item.is_favorite = not item.is_favorite

        logger.debug(f"Favorite {'set' if item.is_favorite else 'cleared'} for {item.key}")
        return item.is_favorite
