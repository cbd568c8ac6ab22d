"""
Alert Widget: categorization, search and favorites engine for event fields.

Usage:
    from alert_widget import TabsState, create_loader

    widget = TabsState()
    await widget.load(create_loader("https://host/data.json"))
    widget.on_input_change("bob")
    widget.snapshot()
"""

from .categorizer import categorize_events, extract_category, parse_events
from .content import get_content
from .data_loader import DataLoader, FileDataLoader, HttpDataLoader, create_loader
from .exceptions import (
    DataLoadError,
    EventFormatError,
    UnknownCategoryError,
    WidgetError,
    WidgetStateError
)
from .favorites import FavoritesRegistry
from .models import Event, FieldEntry, FieldValue, ListItem, WidgetSnapshot
from .search_filter import compile_matcher, filter_items, format_key
from .tabs import DisplayState, LoadStatus, TabsState


__all__ = [
    "categorize_events",
    "extract_category",
    "parse_events",
    "get_content",
    "DataLoader",
    "FileDataLoader",
    "HttpDataLoader",
    "create_loader",
    "DataLoadError",
    "EventFormatError",
    "UnknownCategoryError",
    "WidgetError",
    "WidgetStateError",
    "FavoritesRegistry",
    "Event",
    "FieldEntry",
    "FieldValue",
    "ListItem",
    "WidgetSnapshot",
    "compile_matcher",
    "filter_items",
    "format_key",
    "DisplayState",
    "LoadStatus",
    "TabsState",
]
