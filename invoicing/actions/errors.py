# invoicing/actions/errors.py
"""
The single place where gateway failures become user-facing text.

Raw database detail stays in the server log; callers only ever get the
fixed message for the operation that failed.
"""

import logging
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

PERSISTENCE_ERROR_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "create": "Database Error: Failed to create invoice.",
        "update": "Database Error: Failed to update invoice.",
        "delete": "Database Error: Failed to delete invoice.",
    }
)

INVALID_CREDENTIALS = "Invalid credentials."
AUTH_FAILURE = "Something went wrong. Please try again."


def classify_persistence_error(operation: str, exc: Exception) -> str:
    logger.error("Invoice %s failed: %r", operation, exc)
    return PERSISTENCE_ERROR_MESSAGES[operation]
