"""Core classes for the volume-lockr library.

This module contains the enforcement core: value types, the lock registry,
the clamper, the gates, the enforcer and the controller.
"""

from .base_audio import BaseAudioManager, BaseNotificationHost, BasePreferences
from .clamp import clamp, fraction_to_volume
from .config import LockrConfig
from .constants import RINGER_MODE_NORMAL, STREAM, STREAM_NAMES
from .controller import EnforcementController
from .enforcer import Enforcer
from .errors import InvalidBoundsError, UnsupportedStreamError, VolumeLockrError
from .gates import AccessGate, NotificationGate, is_control_enabled, is_write_allowed
from .mixins import STATUS, ConfigMixin, StatusMixin, get_global_config, set_global_config
from .registry import LockRegistry, resolve_stream
from .volume import Lock, Volume

__all__ = [
    "BaseAudioManager",
    "BaseNotificationHost",
    "BasePreferences",
    "clamp",
    "fraction_to_volume",
    "LockrConfig",
    "RINGER_MODE_NORMAL",
    "STREAM",
    "STREAM_NAMES",
    "EnforcementController",
    "Enforcer",
    "InvalidBoundsError",
    "UnsupportedStreamError",
    "VolumeLockrError",
    "AccessGate",
    "NotificationGate",
    "is_control_enabled",
    "is_write_allowed",
    "STATUS",
    "ConfigMixin",
    "StatusMixin",
    "get_global_config",
    "set_global_config",
    "LockRegistry",
    "resolve_stream",
    "Lock",
    "Volume",
]
