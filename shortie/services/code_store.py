"""
Code Store

In-memory mapping from short code to target URL, shared by every request
thread of one application instance.

Design Decisions:
- Explicitly constructed and injected into the service (no module-level store)
- Guarded by a readers/writer lock: lookups run in parallel, inserts are exclusive
- insert_if_absent makes the collision check and the insert one atomic step
- Entries live for the lifetime of the process; nothing is removed or expired
"""

from typing import Dict, Optional

from shortie.core.rwlock import ReadWriteLock


class CodeStore:
    """
    Concurrency-safe short code -> target URL mapping.

    Only point operations are exposed; there is no iteration over entries.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self._lock = ReadWriteLock()

    def exists(self, code: str) -> bool:
        """Return True if a mapping for ``code`` is present."""
        with self._lock.read_locked():
            return code in self._entries

    def get(self, code: str) -> Optional[str]:
        """Return the target URL stored under ``code``, or None."""
        with self._lock.read_locked():
            return self._entries.get(code)

    def save(self, code: str, target: str) -> None:
        """Insert or overwrite the mapping for ``code``."""
        with self._lock.write_locked():
            self._entries[code] = target

    def insert_if_absent(self, code: str, target: str) -> bool:
        """
        Insert the mapping only if ``code`` is not taken yet.

        Args:
            code: Candidate short code
            target: Target URL

        Returns:
            True if the mapping was inserted, False if ``code`` already existed
        """
        with self._lock.write_locked():
            if code in self._entries:
                return False
            self._entries[code] = target
            return True

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)
