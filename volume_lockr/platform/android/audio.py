"""Android audio manager wrapping android.media.AudioManager."""

import logging

from volume_lockr.core import BaseAudioManager, resolve_stream

from ._android_api import AUDIO_SERVICE, api_version, get_system_service

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidAudioManager",
]


class AndroidAudioManager(BaseAudioManager):
    """Per-stream volume access through the Android AudioManager service.

    The ringer mode stands in for the device interruption mode:
    RINGER_MODE_NORMAL (2) is the only one allowing notification changes.
    """

    def __init__(self, audio_manager=None):
        """Initialize the AndroidAudioManager.

        Args:
            audio_manager: android.media.AudioManager instance, looked up from
                the current context if None
        """
        self._audio_manager = audio_manager or get_system_service(AUDIO_SERVICE, "android.media.AudioManager")

    def get_stream_volume(self, stream) -> int:
        return self._audio_manager.getStreamVolume(int(resolve_stream(stream)))

    def set_stream_volume(self, stream, value: int, flags: int = 0) -> None:
        logger.debug("AndroidAudioManager.set_stream_volume(%s, %s, %s)", stream, value, flags)
        self._audio_manager.setStreamVolume(int(resolve_stream(stream)), int(value), flags)

    def get_stream_max_volume(self, stream) -> int:
        return self._audio_manager.getStreamMaxVolume(int(resolve_stream(stream)))

    def get_stream_min_volume(self, stream) -> int:
        if api_version >= 28:
            return self._audio_manager.getStreamMinVolume(int(resolve_stream(stream)))
        return 0

    def get_mode(self) -> int:
        return self._audio_manager.getRingerMode()
