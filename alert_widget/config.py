"""
Configuration for the Alert Widget
"""
import os

# Data source
# URL (http:// or https://) or local path of the JSON document holding the "Events" array
DATA_SOURCE = os.getenv("ALERT_WIDGET_DATA_SOURCE", "assets/data.json")
LOAD_TIMEOUT = float(os.getenv("ALERT_WIDGET_LOAD_TIMEOUT", "30"))
VERIFY_SSL = os.getenv("ALERT_WIDGET_VERIFY_SSL", "true").lower() == "true"

# Widget header
WIDGET_TITLE = os.getenv("ALERT_WIDGET_TITLE", "Detect Multiple Failed Login")

# Search behaviour when the query is not a valid regular expression
# - "literal" : match the query as a plain case-insensitive substring
# - "none"    : match nothing (the "no data!" row is shown)
INVALID_PATTERN_POLICY = os.getenv("ALERT_WIDGET_INVALID_PATTERN", "literal").lower()

# Display limits
KEY_LABEL_MAX = int(os.getenv("ALERT_WIDGET_KEY_LABEL_MAX", "60"))
VALUE_LABEL_MAX = int(os.getenv("ALERT_WIDGET_VALUE_LABEL_MAX", "70"))
TAB_ITEM_WIDTH = int(os.getenv("ALERT_WIDGET_TAB_ITEM_WIDTH", "100"))

# Logging
LOG_LEVEL = os.getenv("ALERT_WIDGET_LOG_LEVEL", "INFO").upper()

# Static user-visible message for any load failure
LOAD_ERROR_MESSAGE = "Failed to load data."
