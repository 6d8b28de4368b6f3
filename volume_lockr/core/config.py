"""Runtime configuration for the volume-lockr library.

This module provides the LockrConfig dataclass holding the tunables of the
enforcement core.
"""

from dataclasses import dataclass

from .constants import ANDROID_O, PASSWORD_PROTECTED_PREFERENCE, RINGER_MODE_NORMAL

__all__ = [
    "LockrConfig",
]


@dataclass
class LockrConfig:
    """Configuration of the enforcement core.

    Attributes:
        poll_interval: Seconds between two enforcement passes
        permissive_mode: Ringer mode in which the notification stream may change
        password_preference_key: Preference key of the access gate flag
        set_volume_flags: Flags passed to set_stream_volume (0 = no UI, no sound)
        notification_min_api: Lowest Android API level showing the persistent notification
    """

    poll_interval: float = 0.1
    permissive_mode: int = RINGER_MODE_NORMAL
    password_preference_key: str = PASSWORD_PROTECTED_PREFERENCE
    set_volume_flags: int = 0
    notification_min_api: int = ANDROID_O

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")

        if not self.password_preference_key:
            raise ValueError("password_preference_key must not be empty")

        if self.set_volume_flags < 0:
            raise ValueError(f"set_volume_flags must be >= 0, got {self.set_volume_flags}")
