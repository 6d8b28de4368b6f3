"""Test configuration and fixtures for volume-lockr tests."""

import time

import pytest

from volume_lockr.core import STREAM, LockrConfig, LockRegistry
from volume_lockr.platform.virtual import DictPreferences, LogNotificationHost, VirtualAudioManager
from volume_lockr.service import VolumeService


@pytest.fixture
def config():
    """Config with a short poll interval so enforcement tests run fast."""
    return LockrConfig(poll_interval=0.01)


@pytest.fixture
def registry():
    return LockRegistry()


@pytest.fixture
def audio():
    """Virtual audio manager with media at 10/15 and notification max 10."""
    return VirtualAudioManager(
        volumes={STREAM.MEDIA: 10, STREAM.NOTIFICATION: 5},
        max_volumes={
            STREAM.VOICE_CALL: 5,
            STREAM.SYSTEM: 7,
            STREAM.RING: 7,
            STREAM.MEDIA: 15,
            STREAM.ALARM: 7,
            STREAM.NOTIFICATION: 10,
        },
    )


@pytest.fixture
def notifications():
    return LogNotificationHost()


@pytest.fixture
def preferences():
    return DictPreferences()


@pytest.fixture
def service(audio, notifications, preferences, config):
    """VolumeService wired to virtual collaborators, closed after the test."""
    s = VolumeService(
        audio,
        notifications,
        preferences,
        config=config,
        supports_persistent_notification=True,
    )
    yield s
    s.close()


@pytest.fixture
def wait_for():
    """Helper polling a condition until it holds or the timeout expires."""

    def _wait(condition, timeout=1.0):
        start = time.time()
        while not condition() and (time.time() - start) < timeout:
            time.sleep(0.01)
        return condition()

    return _wait
