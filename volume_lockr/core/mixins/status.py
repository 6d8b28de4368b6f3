"""Status mixin for start/stop lifecycles driven by commands."""

import logging
from enum import Enum

from .lock import LockMixin

logger = logging.getLogger(__name__)


class STATUS(Enum):
    """Requested state of a background process."""

    STOPPED = 1
    RUNNING = 2


class StatusMixin(LockMixin):
    """Mixin for objects that can be started and stopped.

    start() and stop() record the requested state and are idempotent:
    starting a running object or stopping a stopped one does nothing. The
    last command issued wins. Subclasses implement _do_start() and _do_stop().
    """

    def __init__(self, *args, **kwargs):
        self._status = STATUS.STOPPED
        super().__init__(*args, **kwargs)

    def status(self) -> STATUS:
        """Get the currently requested status."""
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status == STATUS.RUNNING

    def start(self):
        """Request the RUNNING state.

        Thread-safe; calls _do_start() on transition only.
        """
        logger.debug("StatusMixin.start()")
        with self._lock:
            if self._status == STATUS.RUNNING:
                return
            self._status = STATUS.RUNNING
            self._do_start()

    def stop(self):
        """Request the STOPPED state.

        Thread-safe; calls _do_stop() on transition only, so stopping an
        object that was never started is a no-op.
        """
        logger.debug("StatusMixin.stop()")
        with self._lock:
            if self._status == STATUS.STOPPED:
                return
            self._status = STATUS.STOPPED
            self._do_stop()

    def _do_start(self):
        """Hook for subclasses. Called with the lock held."""
        raise NotImplementedError()

    def _do_stop(self):
        """Hook for subclasses. Called with the lock held."""
        raise NotImplementedError()
