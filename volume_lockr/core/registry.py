"""Registry of active volume locks."""

import logging
from types import MappingProxyType

from .constants import STREAM
from .errors import UnsupportedStreamError
from .mixins import LockMixin
from .volume import Lock

logger = logging.getLogger(__name__)

__all__ = [
    "LockRegistry",
    "resolve_stream",
]


def resolve_stream(stream) -> STREAM:
    """Convert a stream identifier to a STREAM member.

    Raises:
        UnsupportedStreamError: If stream is not one of STREAM
    """
    try:
        return STREAM(stream)
    except ValueError:
        raise UnsupportedStreamError(f"Unsupported stream: {stream!r}") from None


class LockRegistry(LockMixin):
    """Mapping from stream to the Lock it is pinned to.

    The registry is the single source of truth for what is locked to what.
    All access holds the registry lock and Lock values are immutable, so a
    reader never observes half-updated bounds.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._locks: dict[STREAM, Lock] = {}

    def add_lock(self, stream, lower: int, upper: int) -> Lock:
        """Insert or replace the lock of a stream.

        The caller clamps upper to the stream's max volume beforehand; the
        registry does not know device limits.

        Args:
            stream: Stream to lock
            lower: Lowest allowed volume (>= 0)
            upper: Highest allowed volume (>= lower)

        Returns:
            The stored Lock

        Raises:
            InvalidBoundsError: If lower < 0 or lower > upper
            UnsupportedStreamError: If stream is unknown
        """
        logger.debug("LockRegistry.add_lock(%s, %s, %s)", stream, lower, upper)
        stream = resolve_stream(stream)
        lock = Lock(lower, upper)
        with self._lock:
            self._locks[stream] = lock
        return lock

    def remove_lock(self, stream) -> None:
        """Remove the lock of a stream. Does nothing if it has none."""
        logger.debug("LockRegistry.remove_lock(%s)", stream)
        stream = resolve_stream(stream)
        with self._lock:
            self._locks.pop(stream, None)

    def get_locks(self) -> MappingProxyType:
        """Return a read-only snapshot of the current locks."""
        with self._lock:
            return MappingProxyType(dict(self._locks))

    def get_lock(self, stream) -> Lock | None:
        stream = resolve_stream(stream)
        with self._lock:
            return self._locks.get(stream)

    def contains(self, stream) -> bool:
        stream = resolve_stream(stream)
        with self._lock:
            return stream in self._locks

    def __contains__(self, stream) -> bool:
        return self.contains(stream)

    def __len__(self) -> int:
        with self._lock:
            return len(self._locks)
