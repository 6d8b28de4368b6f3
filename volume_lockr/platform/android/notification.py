"""Persistent notification shown while volumes are locked."""

import logging

from volume_lockr.core import BaseNotificationHost

from ._android_api import (
    ICON_LOCK,
    IMPORTANCE_LOW,
    NOTIFICATION_SERVICE,
    NotificationBuilder,
    NotificationChannel,
    api_version,
    get_context,
    get_system_service,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidNotificationHost",
]


class AndroidNotificationHost(BaseNotificationHost):
    """Posts and cancels an ongoing notification through NotificationManager.

    Only used on API 26+, where the notification channel is created once.
    """

    CHANNEL_ID = "volume_lockr"
    CHANNEL_NAME = "Volume locks"
    NOTIFICATION_ID = 4242

    def __init__(self, title="Volume locked", text="Volume locks are active"):
        self._title = title
        self._text = text
        self._visible = False
        self._manager = get_system_service(NOTIFICATION_SERVICE, "android.app.NotificationManager")
        if api_version >= 26:
            channel = NotificationChannel(self.CHANNEL_ID, self.CHANNEL_NAME, IMPORTANCE_LOW)
            self._manager.createNotificationChannel(channel)

    def try_show(self) -> None:
        logger.debug("AndroidNotificationHost.try_show()")
        if self._visible:
            return
        if api_version >= 26:
            builder = NotificationBuilder(get_context(), self.CHANNEL_ID)
        else:
            builder = NotificationBuilder(get_context())
        notification = (
            builder.setContentTitle(self._title)
            .setContentText(self._text)
            .setSmallIcon(ICON_LOCK)
            .setOngoing(True)
            .build()
        )
        self._manager.notify(self.NOTIFICATION_ID, notification)
        self._visible = True

    def try_hide(self) -> None:
        logger.debug("AndroidNotificationHost.try_hide()")
        if not self._visible:
            return
        self._manager.cancel(self.NOTIFICATION_ID)
        self._visible = False
