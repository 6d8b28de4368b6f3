"""Mixin classes for the volume-lockr library.

This package provides reusable mixins for thread safety, start/stop
lifecycles and configuration access.
"""

from .config import ConfigMixin, get_global_config, set_global_config
from .lock import LockMixin
from .status import STATUS, StatusMixin

__all__ = [
    "STATUS",
    "StatusMixin",
    "LockMixin",
    "ConfigMixin",
    "get_global_config",
    "set_global_config",
]
