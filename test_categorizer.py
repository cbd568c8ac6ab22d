"""
Test Categorizer and event parsing

Tests category extraction from field keys, grouping order and the fail-fast
policy for malformed events.
"""
import pytest

from alert_widget.categorizer import categorize_events, extract_category, parse_events
from alert_widget.exceptions import EventFormatError
from alert_widget.models import FieldValue

from conftest import AUTH_EVENT, MULTI_EVENT_DOCUMENT


# =============================================================================
# CATEGORY EXTRACTION
# =============================================================================

class TestExtractCategory:
    """Tests for the event_<category>_ key convention"""

    @pytest.mark.parametrize("key,expected", [
        ("event_auth_user", "auth"),
        ("event_auth_user_name", "auth"),
        ("event_host_ipAddress", "host"),
        ("event_123_x", "123"),
    ])
    def test_matching_keys(self, key, expected):
        assert extract_category(key) == expected

    @pytest.mark.parametrize("key", [
        "source",
        "event_auth",          # no trailing underscore after the category
        "event__user",         # empty category
        "Event_auth_user",     # case sensitive prefix
        "my_event_auth_user",  # prefix must be at the start
        "",
    ])
    def test_non_matching_keys(self, key):
        assert extract_category(key) is None


# =============================================================================
# CATEGORIZATION
# =============================================================================

class TestCategorizeEvents:
    """Tests for building CategorizedData"""

    def test_single_event(self):
        """A single auth event files both fields under 'auth' in key order."""
        categorized = categorize_events(parse_events([AUTH_EVENT]))

        assert list(categorized) == ["auth"]
        entries = categorized["auth"]
        assert [(e.key, e.value.text) for e in entries] == [
            ("event_auth_user", "bob"),
            ("event_auth_result", "fail"),
        ]

    def test_non_matching_keys_are_dropped(self):
        categorized = categorize_events(parse_events(MULTI_EVENT_DOCUMENT["Events"]))

        all_keys = {e.key for entries in categorized.values() for e in entries}
        assert "source" not in all_keys

    def test_categories_in_first_seen_order(self):
        categorized = categorize_events(parse_events(MULTI_EVENT_DOCUMENT["Events"]))
        assert list(categorized) == ["auth", "host"]

    def test_duplicates_kept_once_per_event(self):
        """No deduplication at this stage: the same key appears for every event."""
        categorized = categorize_events(parse_events(MULTI_EVENT_DOCUMENT["Events"]))

        users = [e.value.text for e in categorized["auth"] if e.key == "event_auth_user"]
        assert users == ["bob", "alice"]

    def test_numbers_are_normalized(self):
        categorized = categorize_events(parse_events(MULTI_EVENT_DOCUMENT["Events"]))

        attempt = next(e for e in categorized["auth"] if e.key == "event_auth_attemptCount")
        assert attempt.value == FieldValue(kind="number", text="7")

    def test_empty_input(self):
        assert categorize_events([]) == {}

    def test_event_without_fields(self):
        assert categorize_events(parse_events([{"_rawDataFields": {}}])) == {}


# =============================================================================
# PARSING / MALFORMED EVENTS
# =============================================================================

class TestParseEvents:
    """Tests for the fail-fast malformed event policy"""

    def test_event_id_aliases(self):
        events = parse_events([
            {"id": "a", "_rawDataFields": {}},
            {"_id": 7, "_rawDataFields": {}},
            {"_rawDataFields": {}},
        ])
        assert [e.event_id for e in events] == ["a", 7, None]

    def test_event_id_is_opaque(self):
        events = parse_events([
            {"id": 1.5, "_rawDataFields": {"event_auth_user": "bob"}},
            {"_id": {"$oid": "abc"}, "_rawDataFields": {"event_auth_user": "bob"}},
            {"id": ["a", 1], "_rawDataFields": {}},
        ])
        assert [e.event_id for e in events] == [1.5, {"$oid": "abc"}, ["a", 1]]

    def test_missing_raw_fields(self):
        with pytest.raises(EventFormatError) as exc_info:
            parse_events([AUTH_EVENT, {"id": "broken"}])
        assert exc_info.value.index == 1
        assert "_rawDataFields" in str(exc_info.value)

    def test_raw_fields_not_an_object(self):
        with pytest.raises(EventFormatError):
            parse_events([{"_rawDataFields": ["event_auth_user"]}])

    def test_event_not_an_object(self):
        with pytest.raises(EventFormatError) as exc_info:
            parse_events(["event_auth_user"])
        assert exc_info.value.index == 0

    def test_nested_value_rejected(self):
        with pytest.raises(EventFormatError):
            parse_events([{"_rawDataFields": {"event_auth_user": {"name": "bob"}}}])


class TestFieldValue:
    """Tests for value normalization at ingestion"""

    @pytest.mark.parametrize("raw,kind,text", [
        ("bob", "text", "bob"),
        (5, "number", "5"),
        (5.0, "number", "5"),
        (1.5, "number", "1.5"),
        (-2.0, "number", "-2"),
        (0.0, "number", "0"),
        (1.5e-05, "number", "0.000015"),
        (1e-06, "number", "0.000001"),
        (1e-07, "number", "1e-7"),
        (2.5e-08, "number", "2.5e-8"),
        (1e21, "number", "1e+21"),
        (1.5e22, "number", "1.5e+22"),
        (10 ** 21, "number", "1e+21"),
        (1e20, "number", "100000000000000000000"),
        (True, "text", "true"),
        (False, "text", "false"),
        (None, "text", ""),
    ])
    def test_from_raw(self, raw, kind, text):
        value = FieldValue.from_raw(raw)
        assert value.kind == kind
        assert value.text == text

    def test_rejects_arrays(self):
        with pytest.raises(ValueError):
            FieldValue.from_raw([1, 2])
