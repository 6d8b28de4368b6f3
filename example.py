import logging
import time

from volume_lockr import STREAM, VolumeAdapter, VolumeService
from volume_lockr.platform.virtual import DictPreferences, LogNotificationHost, VirtualAudioManager


def test_lock():
    print("Test lock:")
    audio = VirtualAudioManager(volumes={STREAM.MEDIA: 10})
    with VolumeService(audio, LogNotificationHost(), DictPreferences(), supports_persistent_notification=True) as service:
        service.lock(STREAM.MEDIA, 5, 10)
        audio.set_stream_volume(STREAM.MEDIA, 15)
        time.sleep(0.5)
        print("media volume after raise:", audio.get_stream_volume(STREAM.MEDIA))

        audio.set_stream_volume(STREAM.MEDIA, 0)
        time.sleep(0.5)
        print("media volume after drop:", audio.get_stream_volume(STREAM.MEDIA))

        service.unlock(STREAM.MEDIA)


def test_adapter():
    print("Test adapter:")
    with VolumeService(VirtualAudioManager(), LogNotificationHost(), DictPreferences(), supports_persistent_notification=True) as service:
        adapter = VolumeAdapter(service.get_volumes(), service)
        for card in adapter.update():
            print(card.volume.name, card.volume.value, "/", card.volume.max, "enabled" if card.slider_enabled else "disabled")

        card = adapter[0]
        card.on_range_changed(0.2, 0.6)
        card.on_switch_toggled(True)
        print("locks:", dict(service.get_locks()))
        card.on_switch_toggled(False)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    test_lock()
    test_adapter()
