"""Headless volume list adapter.

Computes the state a UI draws for each stream (range slider thumbs, slider
and switch enablement, switch position) and turns user input into clamped
volume writes and lock requests. Rendering itself belongs to the UI toolkit.
"""

import logging

from .core import AccessGate, clamp, fraction_to_volume, is_control_enabled, is_write_allowed
from .core.mixins import ConfigMixin

logger = logging.getLogger(__name__)

__all__ = [
    "VolumeAdapter",
    "VolumeCard",
]


class VolumeCard:
    """Control state of one stream.

    Attributes:
        volume: Volume shown by the card
        low: Lower slider thumb (0.0-1.0)
        high: Upper slider thumb (0.0-1.0)
        volume_from: Copy of volume holding the lower lock bound
        volume_to: Copy of volume holding the upper lock bound
        slider_enabled: Whether the range slider accepts input
        switch_enabled: Whether the lock switch accepts input
        switch_checked: Whether the lock switch is on
    """

    def __init__(self, adapter: "VolumeAdapter", volume):
        self._adapter = adapter
        self.volume = volume
        self.low = 0.0
        self.high = 1.0
        self.volume_from = volume.copy()
        self.volume_to = volume.copy()
        self.slider_enabled = True
        self.switch_enabled = True
        self.switch_checked = False

    def bind(self, volume) -> "VolumeCard":
        """Refresh the card from a volume and the current locks."""
        logger.debug("VolumeCard.bind(%s)", volume.name)
        self.volume = volume
        adapter = self._adapter
        locks = adapter.get_locks()
        lock = locks.get(volume.stream)

        # Move the thumbs only if the whole range is selected or pinched to a point
        if (self.low == 0.0 and self.high == 1.0) or self.low == self.high:
            self.low = self.high = volume.fraction
            self.volume_from = volume.copy()
            self.volume_to = volume.copy()
        else:
            # Bounds stay integers; the thumbs are only their display
            self.volume_from = volume.copy(value=self.volume_from.value)
            self.volume_to = volume.copy(value=self.volume_to.value)
        if lock is not None:
            self.volume_from.value = lock.lower
            self.volume_to.value = lock.upper
            if volume.max > 0:
                self.low = lock.lower / volume.max
                self.high = lock.upper / volume.max

        volume.locked = lock is not None
        self.switch_checked = volume.locked
        self._refresh_enabled(locks)
        return self

    def on_range_changed(self, low: float, high: float) -> int:
        """Handle a slider move.

        The current value is clamped into the selected range and written to
        the system when the permission gate allows it.

        Returns:
            The clamped volume value
        """
        logger.debug("VolumeCard.on_range_changed(%s, %s)", low, high)
        if not self.slider_enabled:
            logger.debug("Slider of %s is disabled, ignoring", self.volume.name)
            return self.volume.value
        if not 0.0 <= low <= high <= 1.0:
            raise ValueError(f"Invalid slider range: {low} - {high}")

        self.low, self.high = low, high
        volume_from = fraction_to_volume(low, self.volume.max)
        volume_to = fraction_to_volume(high, self.volume.max)
        self.volume_from = self.volume.copy(value=volume_from)
        self.volume_to = self.volume.copy(value=volume_to)

        updated_volume = clamp(self.volume.value, volume_from, volume_to)
        self._adapter.write_volume(self.volume.stream, updated_volume)
        self.volume.value = updated_volume
        return updated_volume

    def on_switch_toggled(self, checked: bool) -> None:
        """Handle the lock switch: lock to [volume_from, volume_to] or unlock."""
        logger.debug("VolumeCard.on_switch_toggled(%s)", checked)
        service = self._adapter.service
        if service is None:
            logger.debug("No volume service, ignoring lock switch")
            return
        if not self.switch_enabled:
            logger.debug("Lock switch of %s is disabled, ignoring", self.volume.name)
            return
        if checked == self.switch_checked:
            return

        if checked:
            service.lock(self.volume.stream, self.volume_from.value, self.volume_to.value)
        else:
            service.unlock(self.volume.stream)
        self.switch_checked = checked
        self.volume.locked = checked
        self._refresh_enabled(self._adapter.get_locks())

    def _refresh_enabled(self, locks):
        adapter = self._adapter
        protected = adapter.is_password_protected()
        self.slider_enabled = is_control_enabled(
            self.volume.stream,
            adapter.get_mode(),
            locks,
            protected,
            adapter.config.permissive_mode,
        )
        self.switch_enabled = not protected


class VolumeAdapter(ConfigMixin):
    """Keeps one VolumeCard per volume in sync with the volume service.

    Lock state is pulled from the service on every bind, never cached.
    Without a service the adapter still renders, but locking is disabled and
    the notification slider stays off.
    """

    def __init__(self, volumes, service=None, audio=None, access_gate: AccessGate | None = None, config=None):
        """Initialize the VolumeAdapter.

        Args:
            volumes: List of Volume to display
            service: VolumeService, or None while it is not bound yet
            audio: Audio manager for slider writes, the service's if None
            access_gate: Password gate, the service's if None
            config: LockrConfig, the service's (or the global one) if None
        """
        if config is None and service is not None:
            config = service.config
        super().__init__(config)
        self._volumes = list(volumes)
        self._service = service
        self._audio = audio if audio is not None else getattr(service, "audio", None)
        if access_gate is None and service is not None:
            access_gate = service.access_gate
        self._access_gate = access_gate
        self._cards: list[VolumeCard] = []

    @property
    def service(self):
        return self._service

    def set_service(self, service) -> None:
        """Attach (or detach with None) the volume service and refresh."""
        logger.debug("VolumeAdapter.set_service(%s)", service)
        self._service = service
        if service is not None:
            if self._audio is None:
                self._audio = service.audio
            if self._access_gate is None:
                self._access_gate = service.access_gate
        self.update()

    def update(self, volumes=None) -> list[VolumeCard]:
        """Replace the volume list (if given) and re-bind every card."""
        logger.debug("VolumeAdapter.update()")
        if volumes is not None:
            self._volumes = list(volumes)
        return [self.bind(position) for position in range(len(self._volumes))]

    def bind(self, position: int) -> VolumeCard:
        volume = self._volumes[position]
        while len(self._cards) <= position:
            self._cards.append(VolumeCard(self, volume))
        del self._cards[len(self._volumes):]
        return self._cards[position].bind(volume)

    def cards(self) -> list[VolumeCard]:
        return list(self._cards[: len(self._volumes)])

    def get_item_count(self) -> int:
        return len(self._volumes)

    def __len__(self) -> int:
        return self.get_item_count()

    def __getitem__(self, position: int) -> VolumeCard:
        return self.bind(position)

    def get_locks(self):
        if self._service is None:
            return {}
        return self._service.get_locks()

    def get_mode(self):
        if self._service is None:
            return None
        return self._service.get_mode()

    def is_password_protected(self) -> bool:
        if self._access_gate is None:
            return False
        return self._access_gate.is_active()

    def write_volume(self, stream, value: int) -> bool:
        """Write a volume to the system if the permission gate allows it.

        Returns:
            True if the value was written
        """
        if self._audio is None:
            logger.debug("No audio manager, skipping volume write")
            return False
        if not is_write_allowed(stream, self.get_mode(), self.get_locks(), self.config.permissive_mode):
            logger.warning("Volume write for stream %s suppressed in mode %s", stream, self.get_mode())
            return False
        self._audio.set_stream_volume(stream, value, self.config.set_volume_flags)
        return True
