"""In-memory platform implementation for the volume-lockr library.

Used on every platform without a system per-stream volume API (desktop
development, tests).
"""

from .audio import VirtualAudioManager
from .notification import LogNotificationHost
from .preferences import DictPreferences

__all__ = [
    "VirtualAudioManager",
    "LogNotificationHost",
    "DictPreferences",
]
