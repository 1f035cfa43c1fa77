"""
Helper utility functions for the Moment Preview service.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional


# very light check that a string looks like a base64 image data URL
IMAGE_DATA_URL_PATTERN = re.compile(r"^data:image/(png|jpeg|jpg|webp);base64,")


def is_image_data_url(value: Any) -> bool:
    """Return True if ``value`` is a string starting with an image data-URL prefix."""
    if not isinstance(value, str):
        return False
    return IMAGE_DATA_URL_PATTERN.match(value) is not None


def extract_mime(data_url: str) -> Optional[str]:
    """
    Extract the MIME type from an image data URL.

    Args:
        data_url: A string such as ``data:image/jpeg;base64,/9j/4AAQ...``

    Returns:
        The MIME type (e.g. ``image/jpeg``), or None if the string is not
        an accepted image data URL
    """
    match = IMAGE_DATA_URL_PATTERN.match(data_url) if isinstance(data_url, str) else None
    if match is None:
        return None
    return f"image/{match.group(1)}"


def preview(text: Any, n: int = 140) -> str:
    """
    Take the first ``n`` characters of a string for previews.

    Args:
        text: The string to shorten; anything else yields an empty string
        n: Maximum number of characters kept

    Returns:
        The string itself, or its first ``n`` characters followed by "..."
    """
    if not isinstance(text, str):
        return ""
    return text[:n] + "..." if len(text) > n else text


def is_integer_value(value: Any) -> bool:
    """True for JSON integers, including floats with no fractional part. Booleans are rejected."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def utc_timestamp() -> str:
    """Get the current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# whitespace as trimmed by JSON clients, including the byte order mark
_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    """Strip leading and trailing whitespace and byte order marks."""
    return _TRIM_PATTERN.sub("", text)
