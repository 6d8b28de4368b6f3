"""Tests for VolumeService."""

import pytest

from volume_lockr import platform
from volume_lockr.core import STREAM, InvalidBoundsError, Lock, LockrConfig, UnsupportedStreamError
from volume_lockr.core.constants import RINGER_MODE_SILENT
from volume_lockr.platform.virtual import VirtualAudioManager
from volume_lockr.service import VolumeService


class TestVolumeServiceInit:
    """Tests for VolumeService construction."""

    @pytest.mark.skipif(platform.BACKEND != "virtual", reason="requires the virtual backend")
    def test_platform_defaults(self):
        with VolumeService(config=LockrConfig(poll_interval=0.01)) as service:
            assert isinstance(service.audio, VirtualAudioManager)
            assert service.notification_gate.supports_persistent_notification
            assert not service.is_password_protected()

    def test_notification_min_api_from_config(self, monkeypatch, audio, notifications, preferences):
        """Test that the configured minimum API level gates the notification."""
        monkeypatch.setattr(platform, "API_LEVEL", 30)
        for min_api, expected in ((99, False), (26, True)):
            config = LockrConfig(poll_interval=0.01, notification_min_api=min_api)
            with VolumeService(audio, notifications, preferences, config=config) as service:
                assert service.notification_gate.supports_persistent_notification is expected

    def test_notification_without_api_level(self, monkeypatch):
        monkeypatch.setattr(platform, "API_LEVEL", None)
        assert platform.supports_persistent_notification(99)

    def test_get_volumes(self, service):
        volumes = service.get_volumes()
        assert [v.name for v in volumes] == ["Media", "Call", "Notification", "Ring", "Alarm", "System"]
        media = volumes[0]
        assert media.stream == STREAM.MEDIA
        assert media.value == 10
        assert media.min == 0
        assert media.max == 15
        assert not media.locked

    def test_get_volumes_reflects_locks(self, service):
        service.lock(STREAM.RING, 1, 3)
        locked = {v.stream: v.locked for v in service.get_volumes()}
        assert locked[STREAM.RING]
        assert not locked[STREAM.MEDIA]


class TestVolumeServiceLocking:
    """Tests for the lock / unlock operations."""

    def test_lock_starts_enforcement_and_notification(self, service, notifications):
        service.lock(STREAM.MEDIA, 5, 10)
        assert service.is_enforcing
        assert service.enforcer.is_running
        assert notifications.visible
        assert service.get_locks() == {STREAM.MEDIA: Lock(5, 10)}

    def test_unlock_last_stops(self, service, notifications, wait_for):
        service.lock(STREAM.MEDIA, 5, 10)
        service.unlock(STREAM.MEDIA)
        assert not service.is_enforcing
        assert not service.enforcer.is_running
        assert not notifications.visible
        assert wait_for(lambda: service.enforcer._thread is None)

    def test_lock_clamps_upper_to_max(self, service):
        service.lock(STREAM.MEDIA, 5, 40)
        assert service.get_locks()[STREAM.MEDIA] == Lock(5, 15)

    def test_lock_enforces(self, service, audio, wait_for):
        service.lock(STREAM.MEDIA, 5, 10)
        audio.set_stream_volume(STREAM.MEDIA, 15)
        assert wait_for(lambda: audio.get_stream_volume(STREAM.MEDIA) == 10)

    def test_lock_errors(self, service):
        with pytest.raises(InvalidBoundsError):
            service.lock(STREAM.MEDIA, 8, 4)
        with pytest.raises(UnsupportedStreamError):
            service.lock(123, 1, 2)
        assert not service.is_enforcing

    def test_add_lock_goes_through_controller(self, service, audio, notifications, wait_for):
        """Test that add_lock starts enforcement and shows the notification."""
        service.add_lock(STREAM.MEDIA, 5, 10)
        assert service.is_enforcing
        assert service.enforcer.is_running == service.is_enforcing
        assert notifications.visible
        audio.set_stream_volume(STREAM.MEDIA, 15)
        assert wait_for(lambda: audio.get_stream_volume(STREAM.MEDIA) == 10)

    def test_remove_lock_goes_through_controller(self, service, notifications):
        """Test that removing the last lock with remove_lock stops enforcement."""
        service.add_lock(STREAM.MEDIA, 5, 10)
        service.remove_lock(STREAM.MEDIA)
        assert not service.is_enforcing
        assert service.enforcer.is_running == service.is_enforcing
        assert not notifications.visible

    def test_start_stop_locking(self, service):
        service.start_locking()
        assert service.enforcer.is_running
        service.stop_locking()
        assert not service.enforcer.is_running

    def test_notification_helpers(self, service, notifications):
        service.try_show_notification()
        assert notifications.visible
        service.try_hide_notification()
        assert not notifications.visible

    def test_get_mode(self, service, audio):
        assert service.get_mode() == 2
        audio.set_mode(RINGER_MODE_SILENT)
        assert service.get_mode() == RINGER_MODE_SILENT

    def test_close_keeps_locks(self, service, notifications):
        service.lock(STREAM.MEDIA, 5, 10)
        service.close()
        assert not service.enforcer.is_running
        assert not notifications.visible
        assert STREAM.MEDIA in service.get_locks()
