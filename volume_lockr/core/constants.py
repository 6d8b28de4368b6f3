"""Stream identifiers and Android constants for the volume-lockr library."""

from enum import IntEnum


class STREAM(IntEnum):
    """Audio streams that can be locked.

    Values match the android.media.AudioManager STREAM_* constants so they can
    be handed to the platform API unchanged.
    """

    VOICE_CALL = 0
    SYSTEM = 1
    RING = 2
    MEDIA = 3
    ALARM = 4
    NOTIFICATION = 5


STREAM_NAMES = {
    STREAM.MEDIA: "Media",
    STREAM.VOICE_CALL: "Call",
    STREAM.NOTIFICATION: "Notification",
    STREAM.RING: "Ring",
    STREAM.ALARM: "Alarm",
    STREAM.SYSTEM: "System",
}

# AudioManager.RINGER_MODE_*
RINGER_MODE_SILENT = 0
RINGER_MODE_VIBRATE = 1
RINGER_MODE_NORMAL = 2  # the only mode in which the notification stream may change

# Build.VERSION_CODES.O, first release with notification channels
ANDROID_O = 26

PASSWORD_PROTECTED_PREFERENCE = "password_protected"

__all__ = [
    "STREAM",
    "STREAM_NAMES",
    "RINGER_MODE_SILENT",
    "RINGER_MODE_VIBRATE",
    "RINGER_MODE_NORMAL",
    "ANDROID_O",
    "PASSWORD_PROTECTED_PREFERENCE",
]
