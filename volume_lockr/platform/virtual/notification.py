"""Notification host logging instead of drawing."""

import logging

from volume_lockr.core import BaseNotificationHost

logger = logging.getLogger(__name__)

__all__ = [
    "LogNotificationHost",
]


class LogNotificationHost(BaseNotificationHost):
    """Tracks notification visibility and logs transitions."""

    def __init__(self):
        self.visible = False

    def try_show(self) -> None:
        if not self.visible:
            logger.info("Volume locks active")
            self.visible = True

    def try_hide(self) -> None:
        if self.visible:
            logger.info("Volume locks released")
            self.visible = False
