"""Validation schemas and parsing for caller-supplied code page settings."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from .const import (
    CODEPAGE_MAX,
    CODEPAGE_MIN,
    CODEPAGE_NAME_PREFIXES,
    CONF_CODEPAGE,
    CONF_ERRORS,
    DEFAULT_ERRORS,
    ERRORS_MODES,
)
from .errors import UnknownCodepageError

_LOGGER = logging.getLogger(__name__)


def _reject_bool(value: Any) -> Any:
    """Reject booleans, which pass an int check."""
    if isinstance(value, bool):
        raise vol.Invalid("expected a code page number, got a boolean")
    return value


CODEPAGE_SCHEMA = vol.Schema(
    vol.All(_reject_bool, int, vol.Range(min=CODEPAGE_MIN, max=CODEPAGE_MAX))
)

CODING_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_CODEPAGE): vol.Any(int, str),
        vol.Optional(CONF_ERRORS, default=DEFAULT_ERRORS): vol.In(ERRORS_MODES),
    }
)


def validate_codepage(value: Any) -> int:
    """Validate a code page number.

    Args:
        value: Candidate code page number.

    Returns:
        The code page number.

    Raises:
        UnknownCodepageError: If the value is not an int in the 16-bit range.
    """
    try:
        return CODEPAGE_SCHEMA(value)  # type: ignore[no-any-return]
    except vol.Invalid as err:
        raise UnknownCodepageError(
            message=f"invalid / unknown Windows code page {value!r}: {err.error_message}"
        ) from err


def parse_codepage(value: int | str) -> int:
    """Parse a code page from various formats.

    Handles:
    - Integer values: validated and returned as-is
    - "1252": parsed as decimal
    - "CP1252", "cp-437", "windows-1257", "IBM869": prefix stripped, case-insensitive

    Args:
        value: The code page as int or string

    Returns:
        The parsed code page number

    Raises:
        UnknownCodepageError: If the value cannot be parsed or is out of range
    """
    if not isinstance(value, str):
        return validate_codepage(value)

    text = value.strip().upper()
    for prefix in CODEPAGE_NAME_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix) :].lstrip("-_ ")
            break

    if not (text.isascii() and text.isdigit()):
        _LOGGER.debug("Could not parse code page from '%s'", value)
        raise UnknownCodepageError(message=f"invalid / unknown Windows code page '{value}'")

    return validate_codepage(int(text, 10))


def validate_coding_config(config: dict[str, Any]) -> dict[str, Any]:
    """Validate a coding configuration mapping.

    Args:
        config: Mapping with a "codepage" and an optional "errors" mode.

    Returns:
        The validated mapping with defaults filled in and the code page
        parsed to a number.

    Raises:
        vol.Invalid: If the mapping does not match CODING_SCHEMA.
        UnknownCodepageError: If the code page cannot be parsed.
    """
    validated: dict[str, Any] = CODING_SCHEMA(config)
    validated[CONF_CODEPAGE] = parse_codepage(validated[CONF_CODEPAGE])
    return validated
