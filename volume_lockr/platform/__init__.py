"""Platform-specific implementations for the volume-lockr library.

Exposes the audio manager, notification host and preference storage of the
current platform, plus its API level, resolved once at import time.
"""

import logging
import os

from currentplatform import platform

from volume_lockr.core.constants import ANDROID_O

logger = logging.getLogger(__name__)

__all__ = [
    "API_LEVEL",
    "BACKEND",
    "AudioManager",
    "NotificationHost",
    "Preferences",
    "supports_persistent_notification",
]

# Select the back-end via environment variable (default: detected platform).
#   VOLUME_LOCKR_BACKEND=android: system AudioManager through jnius
#   VOLUME_LOCKR_BACKEND=virtual: in-memory volumes, for desktop and tests
BACKEND = os.environ.get("VOLUME_LOCKR_BACKEND", "android" if platform == "android" else "virtual").lower()

if BACKEND == "android":
    from .android import AndroidAudioManager as AudioManager
    from .android import AndroidNotificationHost as NotificationHost
    from .android import AndroidPreferences as Preferences
    from .android import api_version as API_LEVEL
elif BACKEND == "virtual":
    from .virtual import DictPreferences as Preferences
    from .virtual import LogNotificationHost as NotificationHost
    from .virtual import VirtualAudioManager as AudioManager

    # No OS release gating the notification
    API_LEVEL = None
else:
    logger.critical("No implementation found for backend %s", BACKEND)
    raise NotImplementedError(f"No implementation available for backend: {BACKEND}")

logger.debug("volume-lockr backend: %s (platform %s)", BACKEND, platform)


def supports_persistent_notification(min_api: int = ANDROID_O) -> bool:
    """Tell whether the platform can show the persistent notification.

    Args:
        min_api: Lowest API level supporting it (LockrConfig.notification_min_api)
    """
    if API_LEVEL is None:
        return True
    return API_LEVEL >= min_api
