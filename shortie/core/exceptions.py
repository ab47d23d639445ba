"""
Custom Exceptions

This module defines the exceptions raised by the shortening core.
The HTTP layer maps each of them to a JSON error envelope.

Mapping:
- ValidationError: client error (400)
- ShortCodeNotFoundError: not found (404)
- RandomSourceError, StorageExhaustedError: server error (500)
"""


class ShortieException(Exception):
    """Base exception for the Shortie service."""
    pass


class ValidationError(ShortieException):
    """Raised when an input URL is rejected."""

    def __init__(self, url: str, reason: str = "Invalid URL format"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url!r}")


class RandomSourceError(ShortieException):
    """Raised when the secure random source cannot produce a code."""

    def __init__(self, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(f"Secure random source failed: {original_error}")


class StorageExhaustedError(ShortieException):
    """Raised when every candidate code collided with an existing one."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No free short code after {attempts} attempts")


class ShortCodeNotFoundError(ShortieException):
    """Raised when a short code is not found in the store."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short code '{short_code}' not found")
