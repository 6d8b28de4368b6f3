"""Lock mixin serializing access to shared lock state."""

import threading


class LockMixin:
    """Mixin that owns the re-entrant lock guarding an object's state.

    Every mixin and component that mutates state from more than one thread
    (the UI thread and the enforcement thread) builds on it.
    """

    def __init__(self, *args, **kwargs):
        """Create the lock."""
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()
