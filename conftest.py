"""
Shared fixtures for alert widget tests.
"""
import pytest
from unittest.mock import AsyncMock

from alert_widget.categorizer import categorize_events, parse_events
from alert_widget.favorites import FavoritesRegistry


# Single failed-login event (Scenario A)
AUTH_EVENT = {
    "_rawDataFields": {
        "event_auth_user": "bob",
        "event_auth_result": "fail",
    }
}

MULTI_EVENT_DOCUMENT = {
    "Events": [
        {
            "id": "evt-1",
            "_rawDataFields": {
                "event_auth_user": "bob",
                "event_auth_result": "fail",
                "event_host_name": "web-01",
                "event_host_ipAddress": "10.0.0.5",
                "source": "siem",
            }
        },
        {
            "id": "evt-2",
            "_rawDataFields": {
                "event_auth_user": "alice",
                "event_auth_attemptCount": 7,
                "event_host_name": "web-02",
            }
        },
    ]
}


def make_loader(document):
    """Mock DataLoader resolving to the given document."""
    loader = AsyncMock()
    loader.fetch.return_value = document
    return loader


@pytest.fixture
def favorites():
    return FavoritesRegistry()


@pytest.fixture
def auth_data():
    return categorize_events(parse_events([AUTH_EVENT]))


@pytest.fixture
def multi_data():
    return categorize_events(parse_events(MULTI_EVENT_DOCUMENT["Events"]))
