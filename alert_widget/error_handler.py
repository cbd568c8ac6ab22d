"""
Error categorization for data load failures.

The widget always shows the same static message when loading fails; the
category computed here is recorded alongside it so operators can tell a
refused connection from a broken document without exposing raw error text.
"""
import re
import logging
from typing import Tuple
from enum import Enum

from .config import LOAD_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of load failures"""
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    MALFORMED_PAYLOAD = "malformed_payload"
    UNKNOWN = "unknown"


# Error patterns to match against error messages (checked in order)
ERROR_PATTERNS = {
    ErrorCategory.TIMEOUT: [
        r"timeout",
        r"timed?\s*out",
        r"deadline\s*exceeded",
    ],
    ErrorCategory.CONNECTION: [
        r"connect(ion)?\s*(error|failed|refused)",
        r"cannot\s*connect",
        r"network\s*(error|unreachable)",
        r"connection\s*reset",
        r"name\s*or\s*service\s*not\s*known",
        r"no\s*route\s*to\s*host",
    ],
    ErrorCategory.NOT_FOUND: [
        r"\b404\b",
        r"not\s*found",
        r"no\s*such\s*file",
    ],
    ErrorCategory.SERVER_ERROR: [
        r"\b50[0-4]\b",
        r"internal\s*server\s*error",
        r"bad\s*gateway",
        r"service\s*unavailable",
    ],
    ErrorCategory.MALFORMED_PAYLOAD: [
        r"events\s*array",
        r"malformed",
        r"_rawDataFields",
        r"invalid\s*json",
        r"expecting\s*value",
        r"field\s*required",
    ],
}


def categorize_error(error_message: str) -> ErrorCategory:
    """
    Categorize an error message into a known error category.

    Args:
        error_message: The raw error message from the loader or parser

    Returns:
        ErrorCategory enum value
    """
    if not error_message:
        return ErrorCategory.UNKNOWN

    for category, patterns in ERROR_PATTERNS.items():
        for pattern in patterns:
            if re.search(pattern, error_message, re.IGNORECASE):
                logger.debug(f"Error categorized as {category.value}: matched pattern '{pattern}'")
                return category

    return ErrorCategory.UNKNOWN


def describe_load_failure(error: BaseException) -> Tuple[str, ErrorCategory]:
    """
    Convert a load failure into the user-visible message and its category.

    Args:
        error: The exception raised while fetching or parsing the data

    Returns:
        Tuple of (user-visible message, error category)
    """
    category = categorize_error(str(error))

    # Log the original error for debugging
    logger.error(f"Data load failed ({category.value}): {error}")

    return LOAD_ERROR_MESSAGE, category
