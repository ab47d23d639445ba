"""
URL Shortening Service

This service handles the core business logic for URL shortening:
- Validating target URLs
- Drawing random short codes and avoiding collisions
- Storing the mapping and building the public short URL
- Resolving a short code back to its target

Design Decisions:
- Random codes: 7 characters of [0-9A-Za-z] from a secure source (62^7 codes)
- Atomic claim: insert_if_absent checks and stores in one step, so two
  concurrent requests can never be handed the same code
- Bounded retries: a fixed number of candidates per request, no backoff
- Fail fast: validation happens before any random draw
"""

import logging
from dataclasses import dataclass
from typing import Callable

from shortie.core.exceptions import ShortCodeNotFoundError, StorageExhaustedError
from shortie.core.validators import sanitize_short_code, validate_url
from shortie.services.code_generator import DEFAULT_CODE_LENGTH, generate_code
from shortie.services.code_store import CodeStore

logger = logging.getLogger(__name__)

MAX_COLLISION_ATTEMPTS = 5

# Codes that collide with fixed routes and could never be resolved
RESERVED_CODES = frozenset({"healthz", "shorten"})


@dataclass(frozen=True)
class ShortenResult:
    """Outcome of a successful shorten call."""
    code: str
    short_url: str


class URLShorteningService:
    """
    Core business logic for URL shortening.

    Stateless apart from the injected store, so one instance can serve
    every request thread.
    """

    def __init__(
        self,
        store: CodeStore,
        base_url: str,
        code_length: int = DEFAULT_CODE_LENGTH,
        max_attempts: int = MAX_COLLISION_ATTEMPTS,
        code_factory: Callable[[int], str] = generate_code,
    ):
        """
        Initialize the URL shortening service.

        Args:
            store: Code store shared by all requests
            base_url: Public address prefix used to build short URLs
            code_length: Length of generated codes
            max_attempts: Candidates drawn before giving up
            code_factory: Callable returning a random code of the given length
        """
        self.store = store
        self.base_url = base_url
        self.code_length = code_length
        self.max_attempts = max_attempts
        self.code_factory = code_factory

    def build_short_url(self, code: str) -> str:
        return f"{self.base_url}/{code}"

    def shorten(self, original_url: str) -> ShortenResult:
        """
        Create a new short URL.

        Args:
            original_url: The long URL to shorten

        Returns:
            ShortenResult with the code and the complete short URL

        Raises:
            ValidationError: If the URL is rejected
            RandomSourceError: If the secure random source fails
            StorageExhaustedError: If every candidate code was already taken
        """
        validate_url(original_url)

        for attempt in range(1, self.max_attempts + 1):
            code = self.code_factory(self.code_length)
            if code not in RESERVED_CODES and self.store.insert_if_absent(code, original_url):
                logger.info(f"Created short URL: {code} -> {original_url}")
                return ShortenResult(code=code, short_url=self.build_short_url(code))
            logger.debug(f"Collision on candidate {code} (attempt {attempt}/{self.max_attempts})")

        logger.error(f"Gave up after {self.max_attempts} colliding candidates for {original_url}")
        raise StorageExhaustedError(self.max_attempts)

    def resolve(self, short_code: str) -> str:
        """
        Retrieve the original URL for a given short code.

        Args:
            short_code: The short code to look up

        Returns:
            The stored target URL

        Raises:
            ShortCodeNotFoundError: If the code is malformed or unknown
        """
        code = sanitize_short_code(short_code, length=self.code_length)
        target = self.store.get(code) if code else None
        if target is None:
            raise ShortCodeNotFoundError(short_code)
        return target
