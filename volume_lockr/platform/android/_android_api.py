"""Android API classes and constants for the volume-lockr library.

Loads the required Android API classes via jnius and exposes the constants
needed to read and write stream volumes, post the persistent notification
and read preferences.

If loading fails, a critical error is logged and the exception is re-raised.
There is no valid fallback: this module must only be imported on Android.
"""

import logging

logger = logging.getLogger(__name__)

try:
    from android import api_version
    from jnius import autoclass, cast

    # Application context sources (python-for-android)
    PythonActivity = autoclass("org.kivy.android.PythonActivity")
    PythonService = autoclass("org.kivy.android.PythonService")

    Context = autoclass("android.content.Context")
    PreferenceManager = autoclass("android.preference.PreferenceManager")

    # Notification classes
    NotificationBuilder = autoclass("android.app.Notification$Builder")
    NotificationChannel = autoclass("android.app.NotificationChannel") if api_version >= 26 else None
    _NotificationManager = autoclass("android.app.NotificationManager")
    _Drawable = autoclass("android.R$drawable")

    # Context constants
    AUDIO_SERVICE = Context.AUDIO_SERVICE
    NOTIFICATION_SERVICE = Context.NOTIFICATION_SERVICE

    # NotificationManager constants
    IMPORTANCE_LOW = _NotificationManager.IMPORTANCE_LOW if api_version >= 24 else 2

    ICON_LOCK = _Drawable.ic_lock_lock

except Exception:
    logger.critical("Failed to load Android APIs - cannot continue", exc_info=True)
    raise


def get_context():
    """Return the running service if any, otherwise the activity."""
    service = PythonService.mService
    if service is not None:
        return service
    return PythonActivity.mActivity


def get_system_service(name, java_class):
    """Fetch a system service from the current context, cast to java_class."""
    return cast(java_class, get_context().getSystemService(name))


__all__ = [
    "api_version",
    "get_context",
    "get_system_service",
    "PreferenceManager",
    "NotificationBuilder",
    "NotificationChannel",
    "AUDIO_SERVICE",
    "NOTIFICATION_SERVICE",
    "IMPORTANCE_LOW",
    "ICON_LOCK",
]
