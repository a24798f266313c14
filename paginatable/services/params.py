"""
Page Parameter Normalization

Turns untrusted page params (query strings, JSON bodies, anything) into a
well-formed page number and page size. Malformed values never raise; each
field falls back to its default independently.
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Optional

from paginatable.core.config import get_settings
from paginatable.schemas.pagination import NormalizedPage, PaginationConfig

DEFAULT_PAGE_NUMBER = 1

_DIGITS = re.compile(r"[0-9]+")


def _field(source: Any, name: str) -> Any:
    """Read a page field from a mapping or an object with attributes."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def looks_like_integer(value: Any) -> bool:
    """
    Check whether a raw value may be converted to a page integer.

    Native numbers pass (bool does not count as one). Strings pass only when
    made entirely of ASCII digits, so "test10", "-10", "1.5" and " 3" fail.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _DIGITS.fullmatch(value) is not None
    return False


def to_integer(value: Any, fallback: int) -> int:
    """
    Convert a raw page value to a non-negative integer.

    Args:
        value: Raw value from the caller
        fallback: Returned for missing, malformed or negative input

    Returns:
        The parsed integer, or ``fallback``
    """
    if value is None:
        return fallback

    if not looks_like_integer(value):
        return fallback

    # nan/inf are native floats but have no integer value
    if isinstance(value, float) and not math.isfinite(value):
        return fallback

    try:
        parsed = int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback

    # Digit strings are never negative here; native numbers can be
    if parsed < 0:
        return fallback

    return parsed


def normalize(raw_params: Any, config: Optional[PaginationConfig | Mapping[str, Any]] = None) -> NormalizedPage:
    """
    Resolve raw page params against a pagination config.

    Args:
        raw_params: Mapping or object with optional ``number`` and ``size``; may be None
        config: Config supplying the fallback page size

    Returns:
        NormalizedPage with the resolved page number and page size
    """
    default_size = _field(config, "size")
    if default_size is None:
        default_size = get_settings().default_page_size

    return NormalizedPage(
        page_number=to_integer(_field(raw_params, "number"), DEFAULT_PAGE_NUMBER),
        page_size=to_integer(_field(raw_params, "size"), default_size),
    )


def compute_offset(page_size: int, page_number: int) -> int:
    """Zero-based row offset of a one-based page."""
    if page_number < 1:
        return 0
    return (page_number - 1) * page_size
