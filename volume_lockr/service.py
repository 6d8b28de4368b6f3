"""VolumeService: composition root of the enforcement core.

The service wires the registry, the enforcer, the notification gate and the
controller to the platform collaborators and offers the operations the UI
layer needs.
"""

import logging

from . import platform
from .core import (
    STREAM_NAMES,
    AccessGate,
    EnforcementController,
    Enforcer,
    LockRegistry,
    NotificationGate,
    Volume,
)
from .core.mixins import ConfigMixin

logger = logging.getLogger(__name__)

__all__ = [
    "VolumeService",
]


class VolumeService(ConfigMixin):
    """Long-lived owner of the lock registry.

    Missing collaborators are taken from the current platform
    (see volume_lockr.platform).
    """

    def __init__(
        self,
        audio=None,
        notifications=None,
        preferences=None,
        config=None,
        supports_persistent_notification=None,
    ):
        """Initialize the VolumeService.

        Args:
            audio: BaseAudioManager, platform default if None
            notifications: BaseNotificationHost, platform default if None
            preferences: BasePreferences, platform default if None
            config: LockrConfig, or None to use the global default
            supports_persistent_notification: Notification capability,
                platform default if None
        """
        super().__init__(config)
        if audio is None or notifications is None or preferences is None or supports_persistent_notification is None:
            audio = audio if audio is not None else platform.AudioManager()
            notifications = notifications if notifications is not None else platform.NotificationHost()
            preferences = preferences if preferences is not None else platform.Preferences()
            if supports_persistent_notification is None:
                supports_persistent_notification = platform.supports_persistent_notification(
                    self.config.notification_min_api
                )

        self._audio = audio
        self._preferences = preferences
        self._registry = LockRegistry()
        self._enforcer = Enforcer(self._registry, audio, config=config)
        self._notification_gate = NotificationGate(notifications, supports_persistent_notification)
        self._access_gate = AccessGate(preferences, self.config.password_preference_key)
        self._controller = EnforcementController(self._registry, self._enforcer, self._notification_gate)

    @property
    def audio(self):
        return self._audio

    @property
    def controller(self) -> EnforcementController:
        return self._controller

    @property
    def enforcer(self) -> Enforcer:
        return self._enforcer

    @property
    def access_gate(self) -> AccessGate:
        return self._access_gate

    @property
    def notification_gate(self) -> NotificationGate:
        return self._notification_gate

    def get_volumes(self) -> list[Volume]:
        """Build a fresh Volume snapshot for every stream, in display order."""
        locks = self._registry.get_locks()
        volumes = []
        for stream, name in STREAM_NAMES.items():
            volumes.append(
                Volume(
                    name=name,
                    stream=stream,
                    value=self._audio.get_stream_volume(stream),
                    min=self._audio.get_stream_min_volume(stream),
                    max=self._audio.get_stream_max_volume(stream),
                    locked=stream in locks,
                )
            )
        return volumes

    def get_locks(self):
        """Read-only snapshot of the current locks."""
        return self._registry.get_locks()

    def add_lock(self, stream, lower: int, upper: int):
        """Lock a stream to [lower, upper] as given, through the controller."""
        return self._controller.on_lock_requested(stream, lower, upper)

    def remove_lock(self, stream) -> None:
        """Unlock a stream through the controller."""
        self._controller.on_unlock_requested(stream)

    def lock(self, stream, lower: int, upper: int):
        """Lock a stream and update enforcement and notification.

        The upper bound is clamped to the stream's max volume.
        """
        upper = min(upper, self._audio.get_stream_max_volume(stream))
        return self.add_lock(stream, lower, upper)

    def unlock(self, stream) -> None:
        """Unlock a stream and update enforcement and notification."""
        self.remove_lock(stream)

    @property
    def is_enforcing(self) -> bool:
        return self._controller.is_enforcing

    def start_locking(self) -> None:
        self._enforcer.start()

    def stop_locking(self) -> None:
        self._enforcer.stop()

    def get_mode(self) -> int:
        return self._audio.get_mode()

    def try_show_notification(self) -> None:
        self._notification_gate.try_show()

    def try_hide_notification(self) -> None:
        self._notification_gate.try_hide()

    def is_password_protected(self) -> bool:
        return self._access_gate.is_active()

    def close(self) -> None:
        """Stop enforcement and hide the notification. Locks are kept."""
        logger.debug("VolumeService.close()")
        self._enforcer.stop()
        self._enforcer.join(timeout=1.0)
        self.try_hide_notification()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
