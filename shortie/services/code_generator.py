"""
Short Code Generation

Codes double as unguessable identifiers, so every character is drawn from
the operating system's secure random source (``secrets``), never from the
``random`` module.
"""

import secrets
import string

from shortie.core.exceptions import RandomSourceError

# Digits, then uppercase, then lowercase: 62 symbols
ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase

DEFAULT_CODE_LENGTH = 7


def generate_code(length: int = DEFAULT_CODE_LENGTH, alphabet: str = ALPHABET) -> str:
    """
    Generate a random short code.

    Each character is drawn independently and uniformly from ``alphabet``.

    Args:
        length: Number of characters in the code
        alphabet: Symbols to draw from

    Returns:
        The generated code

    Raises:
        RandomSourceError: If the OS entropy source is unavailable or fails
    """
    try:
        return "".join(secrets.choice(alphabet) for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(e) from e
