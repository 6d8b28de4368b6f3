"""In-memory audio manager emulating Android's per-stream volumes."""

import logging

from volume_lockr.core import RINGER_MODE_NORMAL, STREAM, BaseAudioManager, resolve_stream
from volume_lockr.core.mixins import LockMixin

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MAX_VOLUMES",
    "VirtualAudioManager",
]

# Stock AOSP maximum volume index per stream
DEFAULT_MAX_VOLUMES = {
    STREAM.VOICE_CALL: 5,
    STREAM.SYSTEM: 7,
    STREAM.RING: 7,
    STREAM.MEDIA: 15,
    STREAM.ALARM: 7,
    STREAM.NOTIFICATION: 7,
}


class VirtualAudioManager(LockMixin, BaseAudioManager):
    """Thread-safe in-memory audio manager.

    Like the real API, writes are silently clamped to [0, max] and writes to
    the notification stream are ignored outside the normal ringer mode.
    """

    def __init__(self, volumes=None, max_volumes=None, mode: int = RINGER_MODE_NORMAL):
        """Initialize the VirtualAudioManager.

        Args:
            volumes: Initial volume per stream (defaults to half of max)
            max_volumes: Maximum volume per stream (defaults to DEFAULT_MAX_VOLUMES)
            mode: Initial ringer mode
        """
        super().__init__()
        self._max_volumes = {resolve_stream(s): v for s, v in (max_volumes or DEFAULT_MAX_VOLUMES).items()}
        self._volumes = {stream: max_volume // 2 for stream, max_volume in self._max_volumes.items()}
        for stream, value in (volumes or {}).items():
            stream = resolve_stream(stream)
            self._volumes[stream] = self._bounded(stream, value)
        self._mode = mode

    def _bounded(self, stream, value):
        return max(0, min(self._max_volumes[stream], int(value)))

    def get_stream_volume(self, stream) -> int:
        stream = resolve_stream(stream)
        with self._lock:
            return self._volumes[stream]

    def set_stream_volume(self, stream, value: int, flags: int = 0) -> None:
        logger.debug("VirtualAudioManager.set_stream_volume(%s, %s, %s)", stream, value, flags)
        stream = resolve_stream(stream)
        with self._lock:
            if stream == STREAM.NOTIFICATION and self._mode != RINGER_MODE_NORMAL:
                logger.debug("Ignoring notification volume change in ringer mode %s", self._mode)
                return
            self._volumes[stream] = self._bounded(stream, value)

    def get_stream_max_volume(self, stream) -> int:
        return self._max_volumes[resolve_stream(stream)]

    def get_mode(self) -> int:
        return self._mode

    def set_mode(self, mode: int) -> None:
        """Change the emulated ringer mode."""
        logger.debug("VirtualAudioManager.set_mode(%s)", mode)
        with self._lock:
            self._mode = mode
