"""Tests for the write, control, notification and access gates."""

from unittest.mock import patch

from volume_lockr.core import (
    RINGER_MODE_NORMAL,
    STREAM,
    AccessGate,
    Lock,
    NotificationGate,
    is_control_enabled,
    is_write_allowed,
)
from volume_lockr.core.constants import RINGER_MODE_SILENT, RINGER_MODE_VIBRATE
from volume_lockr.platform.virtual import DictPreferences

from .mock_class import RecordingNotificationHost


class TestIsWriteAllowed:
    """Tests for is_write_allowed()."""

    def test_notification_requires_normal_mode(self):
        assert is_write_allowed(STREAM.NOTIFICATION, RINGER_MODE_NORMAL, {})
        assert not is_write_allowed(STREAM.NOTIFICATION, RINGER_MODE_SILENT, {})
        assert not is_write_allowed(STREAM.NOTIFICATION, RINGER_MODE_VIBRATE, {})

    def test_notification_lock_is_kept_latent(self):
        """Test that a lock does not make a restrictive mode writable."""
        locks = {STREAM.NOTIFICATION: Lock(3, 8)}
        assert not is_write_allowed(STREAM.NOTIFICATION, RINGER_MODE_SILENT, locks)
        assert is_write_allowed(STREAM.NOTIFICATION, RINGER_MODE_NORMAL, locks)

    def test_other_streams_always_writable(self):
        for stream in (STREAM.MEDIA, STREAM.RING, STREAM.ALARM, STREAM.VOICE_CALL, STREAM.SYSTEM):
            assert is_write_allowed(stream, RINGER_MODE_SILENT, {})

    def test_custom_permissive_mode(self):
        assert is_write_allowed(STREAM.NOTIFICATION, 1, {}, permissive_mode=1)


class TestIsControlEnabled:
    """Tests for is_control_enabled()."""

    def test_unlocked_stream_enabled(self):
        assert is_control_enabled(STREAM.MEDIA, RINGER_MODE_SILENT, {})

    def test_locked_stream_disabled(self):
        assert not is_control_enabled(STREAM.MEDIA, RINGER_MODE_NORMAL, {STREAM.MEDIA: Lock(1, 2)})

    def test_notification_needs_mode_and_no_lock(self):
        assert is_control_enabled(STREAM.NOTIFICATION, RINGER_MODE_NORMAL, {})
        assert not is_control_enabled(STREAM.NOTIFICATION, RINGER_MODE_SILENT, {})
        assert not is_control_enabled(STREAM.NOTIFICATION, RINGER_MODE_NORMAL, {STREAM.NOTIFICATION: Lock(1, 2)})

    def test_password_overrides_everything(self):
        assert not is_control_enabled(STREAM.MEDIA, RINGER_MODE_NORMAL, {}, password_protected=True)
        assert not is_control_enabled(STREAM.NOTIFICATION, RINGER_MODE_NORMAL, {}, password_protected=True)


class TestNotificationGate:
    """Tests for NotificationGate."""

    def test_show_and_hide(self):
        host = RecordingNotificationHost()
        gate = NotificationGate(host, True)
        gate.update({STREAM.MEDIA: Lock(1, 2)})
        gate.update({})
        assert host.calls == ["show", "hide"]

    def test_should_show(self):
        gate = NotificationGate(RecordingNotificationHost(), True)
        assert gate.should_show({STREAM.MEDIA: Lock(1, 2)})
        assert not gate.should_show({})

    def test_update_follows_should_show(self):
        """Test that update() shows exactly when should_show() says so."""
        host = RecordingNotificationHost()
        gate = NotificationGate(host, True)
        locks = {STREAM.MEDIA: Lock(1, 2)}
        with patch.object(gate, "should_show", return_value=False) as should_show:
            gate.update(locks)
        should_show.assert_called_once_with(locks)
        assert host.calls == ["hide"]

    def test_capability_resolved_once(self):
        host = RecordingNotificationHost()
        gate = NotificationGate(host, False)
        assert not gate.supports_persistent_notification
        gate.update({STREAM.MEDIA: Lock(1, 2)})
        gate.try_hide()
        assert host.calls == []
        assert not gate.should_show({STREAM.MEDIA: Lock(1, 2)})

    def test_missing_host(self):
        gate = NotificationGate(None, True)
        gate.update({STREAM.MEDIA: Lock(1, 2)})


class TestAccessGate:
    """Tests for AccessGate."""

    def test_inactive_by_default(self):
        assert not AccessGate(DictPreferences()).is_active()
        assert not AccessGate(None).is_active()

    def test_reads_preference_each_time(self):
        preferences = DictPreferences()
        gate = AccessGate(preferences)
        preferences.put_boolean("password_protected", True)
        assert gate.is_active()
        preferences.put_boolean("password_protected", False)
        assert not gate.is_active()

    def test_custom_key(self):
        gate = AccessGate(DictPreferences({"locked_ui": True}), key="locked_ui")
        assert gate.is_active()
