"""Value types describing stream volumes and locks."""

from dataclasses import dataclass, replace

from .errors import InvalidBoundsError

__all__ = [
    "Volume",
    "Lock",
]


@dataclass
class Volume:
    """Snapshot of one stream's volume.

    Attributes:
        name: Human readable stream name
        stream: STREAM identifier
        value: Current volume in stream units
        min: Lowest volume the device accepts
        max: Highest volume the device accepts
        locked: Whether the stream was locked when the snapshot was taken.
            Consumers must query the registry rather than trust this flag.
    """

    name: str
    stream: int
    value: int
    min: int
    max: int
    locked: bool = False

    def copy(self, **changes) -> "Volume":
        """Return a copy of this volume with the given fields replaced."""
        return replace(self, **changes)

    @property
    def fraction(self) -> float:
        """Current value as a fraction of max (0.0 when max is 0)."""
        if self.max <= 0:
            return 0.0
        return self.value / self.max


@dataclass(frozen=True)
class Lock:
    """Closed interval [lower, upper] a stream's volume is pinned to."""

    lower: int
    upper: int

    def __post_init__(self):
        if self.lower < 0:
            raise InvalidBoundsError(f"lower bound must be >= 0, got {self.lower}")
        if self.lower > self.upper:
            raise InvalidBoundsError(f"lower bound {self.lower} is greater than upper bound {self.upper}")

    def __contains__(self, value: int) -> bool:
        return self.lower <= value <= self.upper
