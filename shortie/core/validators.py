"""
Input Validators and Sanitizers

This module provides validation and sanitization functions for user inputs.

Security Considerations:
- Only http and https targets are accepted, so javascript:, data: and
  file: links can never be stored
- Short codes are checked against the code alphabet before any lookup
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from shortie.core.exceptions import ValidationError

ALLOWED_SCHEMES = ("http", "https")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def validate_url(url: str) -> str:
    """
    Validate a target URL before it is shortened.

    The URL must parse as an absolute URI, use exactly ``http`` or ``https``
    as its scheme (case-sensitive) and name a non-empty host.

    Args:
        url: The URL string to validate

    Returns:
        The URL, unchanged

    Raises:
        ValidationError: If the URL is rejected
    """
    if not url or not isinstance(url, str):
        raise ValidationError(url, reason="URL is required")

    if _CONTROL_CHARS.search(url):
        raise ValidationError(url, reason="URL contains control characters")

    # urlsplit lower-cases the scheme, so compare the raw prefix instead
    raw_scheme, sep, _ = url.partition(":")
    if not sep or raw_scheme not in ALLOWED_SCHEMES:
        raise ValidationError(url, reason="URL must use http or https")

    try:
        parts = urlsplit(url)
        # Accessing port validates it (non-numeric or out of range raises)
        parts.port
    except ValueError as e:
        raise ValidationError(url, reason=f"Malformed URL ({e})") from e

    if not parts.hostname:
        raise ValidationError(url, reason="URL must have a host")

    if any(ch.isspace() for ch in parts.netloc):
        raise ValidationError(url, reason="URL host contains whitespace")

    return url


def sanitize_short_code(short_code: str, length: int = 7) -> Optional[str]:
    """
    Sanitize and validate short code format.

    Short codes are exactly ``length`` characters of [0-9A-Za-z].
    Anything else cannot exist in the store, so callers treat it as a miss.

    Args:
        short_code: The short code to sanitize
        length: Expected code length

    Returns:
        The short code if valid, None otherwise
    """
    if not short_code or not isinstance(short_code, str):
        return None

    if len(short_code) != length:
        return None

    if not re.fullmatch(r"[0-9A-Za-z]+", short_code):
        return None

    return short_code
