"""Presence cache for optional dependencies."""

import threading


class DependencyPresenceCache:
    """Records markers that have been proven present.

    Entries are only ever added: a library that has been found is assumed to
    stay installed for the life of the process, and there is no eviction. A
    marker that has not been found is simply not recorded, so it is probed
    again next time.

    The lock guards the underlying set only. It is never held while probing.
    """

    def __init__(self) -> None:
        self._present: set[str] = set()
        self._lock = threading.Lock()

    def is_known_present(self, marker: str) -> bool:
        """Return True if *marker* has been recorded as present."""
        with self._lock:
            return marker in self._present

    def mark_present(self, marker: str) -> None:
        """Record *marker* as present. Idempotent."""
        with self._lock:
            self._present.add(marker)

    def __contains__(self, marker: object) -> bool:
        return isinstance(marker, str) and self.is_known_present(marker)

    def __len__(self) -> int:
        with self._lock:
            return len(self._present)
