"""Background worker keeping locked streams inside their bounds."""

import logging
import threading

from .base_audio import BaseAudioManager
from .clamp import clamp
from .gates import is_write_allowed
from .mixins import STATUS, ConfigMixin, StatusMixin
from .registry import LockRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "Enforcer",
]


class Enforcer(StatusMixin, ConfigMixin):
    """Polls the live volume of every locked stream and clamps it back.

    The Enforcer:
    - Runs a single daemon thread while RUNNING
    - Only reads the registry; writes go to the audio manager
    - Performs one last pass when stopped, so no locked stream is left
      out of range
    - Treats start() and stop() as commands: a start issued while the thread
      is winding down keeps it alive, the last command wins
    """

    def __init__(self, registry: LockRegistry, audio: BaseAudioManager, *args, **kwargs):
        """Initialize the Enforcer.

        Args:
            registry: Registry to read locks from
            audio: Audio manager used to read and correct volumes
            config: LockrConfig, or None to use the global default
        """
        super().__init__(*args, **kwargs)
        self._registry = registry
        self._audio = audio
        self._thread = None
        self._wake = threading.Event()

    def enforce_once(self) -> list:
        """Run a single enforcement pass.

        Returns:
            Streams whose volume was corrected
        """
        locks = self._registry.get_locks()
        if not locks:
            return []

        cfg = self.config
        mode = self._audio.get_mode()
        corrected = []
        for stream, lock in locks.items():
            current = self._audio.get_stream_volume(stream)
            target = clamp(current, lock.lower, lock.upper)
            if target == current:
                continue
            if not is_write_allowed(stream, mode, locks, cfg.permissive_mode):
                logger.debug("Stream %s out of range but not writable in mode %s", stream.name, mode)
                continue
            logger.info("Stream %s moved to %s, restoring %s", stream.name, current, target)
            self._audio.set_stream_volume(stream, target, cfg.set_volume_flags)
            corrected.append(stream)
        return corrected

    def join(self, timeout: float | None = None) -> None:
        """Wait for the worker thread to exit."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def _do_start(self):
        """Hook called when the status changes to RUNNING."""
        self._wake.clear()
        if self._thread is None:
            logger.debug("Create enforcer Thread")
            self._thread = threading.Thread(target=self._thread_task, name="volume-lockr-enforcer", daemon=True)
            logger.debug("Start enforcer Thread")
            self._thread.start()

    def _do_stop(self):
        """Hook called when the status changes to STOPPED."""
        self._wake.set()

    def _thread_task(self):
        """Daemon thread re-applying the locks until stopped."""
        logger.debug("In enforcer Thread")
        try:
            while True:
                with self._lock:
                    if self._status == STATUS.STOPPED:
                        self.enforce_once()
                        self._thread = None
                        break
                self.enforce_once()
                self._wake.wait(self.config.poll_interval)
            logger.debug("Exit enforcer Thread")
        except Exception as e:
            logger.exception(f"Critical error: {e}")
            with self._lock:
                self._thread = None
                self._status = STATUS.STOPPED
            raise
