"""Gates deciding which writes, controls and notifications are allowed.

- is_write_allowed(): may a value be written to the system volume now?
- is_control_enabled(): may the user interact with a stream's slider?
- NotificationGate: shows the persistent notification while locks exist
- AccessGate: global password flag disabling every mutating control
"""

import logging
from collections.abc import Mapping

from .base_audio import BaseNotificationHost, BasePreferences
from .constants import PASSWORD_PROTECTED_PREFERENCE, RINGER_MODE_NORMAL, STREAM

logger = logging.getLogger(__name__)

__all__ = [
    "is_write_allowed",
    "is_control_enabled",
    "NotificationGate",
    "AccessGate",
]


def is_write_allowed(stream, mode: int, locks: Mapping, permissive_mode: int = RINGER_MODE_NORMAL) -> bool:
    """Tell whether a volume write for stream may reach the system.

    The notification stream can only change while the ringer is in the
    permissive mode. A lock on it is kept when the mode changes: it simply
    cannot be enforced until the permissive mode returns. Every other stream
    is always writable.

    Args:
        stream: Stream about to be written
        mode: Current ringer mode
        locks: Current lock snapshot
        permissive_mode: Ringer mode allowing notification volume changes
    """
    if stream == STREAM.NOTIFICATION:
        return mode == permissive_mode
    return True


def is_control_enabled(
    stream,
    mode: int,
    locks: Mapping,
    password_protected: bool = False,
    permissive_mode: int = RINGER_MODE_NORMAL,
) -> bool:
    """Tell whether a stream's range slider accepts user input."""
    if password_protected:
        return False
    if stream in locks:
        return False
    if stream == STREAM.NOTIFICATION:
        return mode == permissive_mode
    return True


class NotificationGate:
    """Keeps the persistent notification visible exactly while locks exist.

    Whether the platform supports the notification is decided once, at
    construction; on unsupported platforms the host is never called.
    """

    def __init__(self, host: BaseNotificationHost | None, supports_persistent_notification: bool):
        self._host = host
        self._supported = bool(supports_persistent_notification)

    @property
    def supports_persistent_notification(self) -> bool:
        return self._supported

    def should_show(self, locks: Mapping) -> bool:
        return self._supported and len(locks) > 0

    def update(self, locks: Mapping) -> None:
        """Show or hide the notification according to the lock snapshot."""
        logger.debug("NotificationGate.update(%d locks)", len(locks))
        if self.should_show(locks):
            self.try_show()
        else:
            self.try_hide()

    def try_show(self) -> None:
        if self._supported and self._host is not None:
            self._host.try_show()

    def try_hide(self) -> None:
        if self._supported and self._host is not None:
            self._host.try_hide()


class AccessGate:
    """Global password flag read from preference storage.

    When active, every mutating control is disabled. The flag is re-read on
    every call and never affects programmatic changes to the registry.
    """

    def __init__(self, preferences: BasePreferences | None, key: str = PASSWORD_PROTECTED_PREFERENCE):
        self._preferences = preferences
        self._key = key

    def is_active(self) -> bool:
        if self._preferences is None:
            return False
        return self._preferences.get_boolean(self._key, False)
