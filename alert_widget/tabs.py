"""
Tab/display state for the alert widget.

TabsState owns the loaded events, their categorized fields, the favorites
registry and everything the user has selected. Every operation runs to
completion synchronously; the one-time data load is the only await point.

Display states:
    NO_CATEGORY  - nothing selected, no rows
    CATEGORY     - a category is selected and its rows are shown

Observed behaviour that is kept on purpose:
- select_tab records the tab index but always selects the first category.
- toggle_category shows the category's rows directly, without the search
  filter's deduplication or "no data!" placeholder.
- toggling a favorite does not re-run the filter, so an unfavorited row
  stays visible in favorites-only mode until the next filter pass.
"""
import logging
from enum import Enum
from typing import List, Optional

from .categorizer import categorize_events, parse_events
from .config import INVALID_PATTERN_POLICY, WIDGET_TITLE
from .content import get_content
from .data_loader import DataLoader, extract_events
from .display import capitalize, format_timestamp, tab_strip_width, to_display_row
from .error_handler import describe_load_failure
from .exceptions import UnknownCategoryError, WidgetStateError
from .favorites import FavoritesRegistry
from .models import CategorizedData, Event, ListItem, WidgetSnapshot
from .search_filter import filter_items

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Lifecycle of the one-time data load"""
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


class DisplayState(str, Enum):
    """Whether a category is currently selected"""
    NO_CATEGORY = "no_category_selected"
    CATEGORY = "category_selected"


class TabsState:
    """State machine behind the tabbed alert widget"""

    def __init__(
        self,
        favorites: Optional[FavoritesRegistry] = None,
        title: str = WIDGET_TITLE,
        invalid_pattern_policy: str = INVALID_PATTERN_POLICY
    ):
        self.title = title
        self.favorites = favorites if favorites is not None else FavoritesRegistry()
        self.invalid_pattern_policy = invalid_pattern_policy

        self.status = LoadStatus.PENDING
        self.error_message: Optional[str] = None
        self.error_category: Optional[str] = None

        self.events: List[Event] = []
        self.categorized_data: Optional[CategorizedData] = None

        self.selected_category: Optional[str] = None
        self.selected_content: List[ListItem] = []
        self.search_query: str = ""
        self.selected_tab_index: int = 0
        self.show_favorites: bool = False

    # ===== LOAD LIFECYCLE =====

    @property
    def display_state(self) -> DisplayState:
        if self.selected_category is None:
            return DisplayState.NO_CATEGORY
        return DisplayState.CATEGORY

    @property
    def categories(self) -> List[str]:
        """Category names in insertion order (empty until loaded)"""
        return list(self.categorized_data or {})

    async def load(self, loader: DataLoader) -> None:
        """
        Fetch and categorize the events, then select the first tab.

        Any failure, including one raised by a third-party loader, puts the
        widget in the failed state with a static message and categorized_data
        stays unset.

        Raises:
            WidgetStateError: If a load has already been attempted
        """
        if self.status is not LoadStatus.PENDING:
            raise WidgetStateError(f"Widget data already {self.status.value}; load runs once")

        try:
            document = await loader.fetch()
            events = parse_events(extract_events(document))
            categorized = categorize_events(events)
        except Exception as e:
            self.error_message, category = describe_load_failure(e)
            self.error_category = category.value
            self.status = LoadStatus.FAILED
            return

        self.events = events
        self.categorized_data = categorized
        self.status = LoadStatus.LOADED
        logger.info(f"Loaded {len(events)} events in {len(categorized)} categories")

        self.select_tab(0)

    def _require_loaded(self) -> CategorizedData:
        if self.categorized_data is None:
            raise WidgetStateError(f"Widget data is {self.status.value}")
        return self.categorized_data

    # ===== TRANSITIONS =====

    def select_tab(self, index: int) -> None:
        """
        Record the tab index and select the first category.

        The index only drives tab highlighting; the category shown is always
        the first one.
        """
        categorized = self._require_loaded()
        self.selected_tab_index = index

        categories = list(categorized)
        if categories:
            self.selected_category = categories[0]
            self.selected_content = []
            self._filter()

    def toggle_category(self, category: str) -> None:
        """Select a category, or deselect it if it is already selected."""
        categorized = self._require_loaded()
        if category not in categorized:
            raise UnknownCategoryError(category)

        self.show_favorites = False
        if self.selected_category == category:
            self.selected_category = None
            self.selected_content = []
            logger.debug(f"Category '{category}' deselected")
        else:
            self.selected_category = category
            self.selected_content = get_content(category, categorized, self.favorites)
            logger.debug(f"Category '{category}' selected ({len(self.selected_content)} rows)")

    def on_input_change(self, text: str) -> None:
        self._require_loaded()
        self.search_query = text
        self._filter()

    def toggle_favorite(self, item: ListItem) -> bool:
        """Flip a row's favorite status; the displayed rows are not re-filtered."""
        if item.is_placeholder:
            raise WidgetStateError("The placeholder row cannot be a favorite")
        return self.favorites.toggle(item)

    def toggle_show_favorites(self, checked: Optional[bool] = None) -> None:
        """
        Switch favorites-only mode and re-run the filter.

        Args:
            checked: Checkbox state; the flag simply flips when omitted
        """
        self._require_loaded()
        self.show_favorites = (not self.show_favorites) if checked is None else checked
        self._filter()

    def _filter(self) -> None:
        self.selected_content = filter_items(
            self.selected_category,
            self.categorized_data or {},
            self.favorites,
            search_query=self.search_query,
            restrict_to_favorites=self.show_favorites,
            policy=self.invalid_pattern_policy
        )

    # ===== VIEW =====

    def snapshot(self) -> WidgetSnapshot:
        categories = self.categories
        return WidgetSnapshot(
            title=self.title,
            status=self.status.value,
            error_message=self.error_message,
            error_category=self.error_category,
            categories=categories,
            category_labels=[capitalize(category) for category in categories],
            selected_tab_index=self.selected_tab_index,
            selected_category=self.selected_category,
            search_query=self.search_query,
            show_favorites=self.show_favorites,
            tab_width=tab_strip_width(len(self.events)),
            tab_times=[format_timestamp(event.timestamp) for event in self.events],
            rows=[to_display_row(item) for item in self.selected_content],
        )
