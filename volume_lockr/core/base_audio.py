"""Interfaces of the platform collaborators used by the enforcement core.

Platform packages implement these classes on top of the real OS services.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "BaseAudioManager",
    "BaseNotificationHost",
    "BasePreferences",
]


class BaseAudioManager(ABC):
    """System audio API.

    Implementations are synchronous and may clamp written values to the
    device's own absolute bounds.
    """

    @abstractmethod
    def get_stream_volume(self, stream) -> int:
        """Get the live volume of a stream."""
        raise NotImplementedError()

    @abstractmethod
    def set_stream_volume(self, stream, value: int, flags: int = 0) -> None:
        """Write the live volume of a stream."""
        raise NotImplementedError()

    @abstractmethod
    def get_stream_max_volume(self, stream) -> int:
        """Get the highest volume the device accepts for a stream."""
        raise NotImplementedError()

    def get_stream_min_volume(self, stream) -> int:
        """Get the lowest volume the device accepts for a stream."""
        return 0

    @abstractmethod
    def get_mode(self) -> int:
        """Get the device ringer mode (2 is the permissive normal mode)."""
        raise NotImplementedError()


class BaseNotificationHost(ABC):
    """Persistent "volumes are locked" notification.

    Both methods are idempotent.
    """

    @abstractmethod
    def try_show(self) -> None:
        raise NotImplementedError()

    @abstractmethod
    def try_hide(self) -> None:
        raise NotImplementedError()


class BasePreferences(ABC):
    """Read access to the user's preference storage."""

    @abstractmethod
    def get_boolean(self, key: str, default: bool = False) -> bool:
        raise NotImplementedError()
