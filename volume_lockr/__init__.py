import logging

from .adapter import VolumeAdapter, VolumeCard  # noqa: F401
from .core import STREAM, Lock, LockrConfig, Volume  # noqa: F401
from .platform import BACKEND
from .service import VolumeService  # noqa: F401

__version__ = "1.0.0"

logger = logging.getLogger(__name__)
logger.debug("volume_lockr %s using the %s backend", __version__, BACKEND)
