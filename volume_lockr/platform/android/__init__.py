"""Android platform implementation for the volume-lockr library.

Requires python-for-android (the android module) and pyjnius.
"""

from ._android_api import api_version
from .audio import AndroidAudioManager
from .notification import AndroidNotificationHost
from .preferences import AndroidPreferences

__all__ = [
    "api_version",
    "AndroidAudioManager",
    "AndroidNotificationHost",
    "AndroidPreferences",
]
