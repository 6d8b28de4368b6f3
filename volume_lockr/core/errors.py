"""Exceptions raised by the volume-lockr library."""

__all__ = [
    "VolumeLockrError",
    "InvalidBoundsError",
    "UnsupportedStreamError",
]


class VolumeLockrError(Exception):
    """Base class for all volume-lockr errors."""


class InvalidBoundsError(VolumeLockrError, ValueError):
    """Raised when a lock is requested with lower > upper or a negative bound."""


class UnsupportedStreamError(VolumeLockrError, ValueError):
    """Raised when an operation references a stream outside STREAM."""
