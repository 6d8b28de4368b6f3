"""Enforcement controller: the only entry point mutating the lock registry."""

import logging

from .gates import NotificationGate
from .mixins import LockMixin
from .registry import LockRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "EnforcementController",
]


class EnforcementController(LockMixin):
    """Owns the lock registry and drives the dependent subsystems.

    After every lock or unlock the controller re-derives whether enforcement
    is needed (the registry is not empty) and:
    - starts or stops the background process host
    - asks the notification gate to show or hide the notification

    Enforcement state is never stored; is_enforcing reads the registry.
    """

    def __init__(
        self,
        registry: LockRegistry | None = None,
        process_host=None,
        notification_gate: NotificationGate | None = None,
        *args,
        **kwargs,
    ):
        """Initialize the EnforcementController.

        Args:
            registry: Registry to own, a new empty one if None
            process_host: Object with idempotent start() / stop(), or None
            notification_gate: Gate updated after each mutation, or None
        """
        super().__init__(*args, **kwargs)
        self._registry = registry if registry is not None else LockRegistry()
        self._process_host = process_host
        self._notification_gate = notification_gate

    @property
    def registry(self) -> LockRegistry:
        return self._registry

    @property
    def is_enforcing(self) -> bool:
        return len(self._registry) > 0

    def get_locks(self):
        """Read-only snapshot of the current locks."""
        return self._registry.get_locks()

    def on_lock_requested(self, stream, lower: int, upper: int):
        """Lock a stream to [lower, upper] and refresh dependent state.

        Raises:
            InvalidBoundsError: If lower < 0 or lower > upper
            UnsupportedStreamError: If stream is unknown
        """
        logger.debug("EnforcementController.on_lock_requested(%s, %s, %s)", stream, lower, upper)
        with self._lock:
            lock = self._registry.add_lock(stream, lower, upper)
            self._adjust_service()
            self._adjust_notification()
            return lock

    def on_unlock_requested(self, stream) -> None:
        """Unlock a stream and refresh dependent state."""
        logger.debug("EnforcementController.on_unlock_requested(%s)", stream)
        with self._lock:
            self._registry.remove_lock(stream)
            self._adjust_service()
            self._adjust_notification()

    def _adjust_service(self):
        if self._process_host is None:
            logger.debug("No process host, skipping enforcement update")
            return
        if self.is_enforcing:
            self._process_host.start()
        else:
            logger.info("Last lock removed, stopping enforcement")
            self._process_host.stop()

    def _adjust_notification(self):
        if self._notification_gate is None:
            return
        self._notification_gate.update(self._registry.get_locks())
