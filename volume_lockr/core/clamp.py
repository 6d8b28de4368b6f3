"""Clamping helpers shared by the registry, the enforcer and the adapter."""

__all__ = [
    "clamp",
    "fraction_to_volume",
]


def clamp(candidate: int, lower: int, upper: int) -> int:
    """Return the value of [lower, upper] nearest to candidate.

    Args:
        candidate: Raw volume coming from a slider or from the system
        lower: Lowest allowed volume
        upper: Highest allowed volume

    Returns:
        candidate unchanged when already in range, otherwise the closest bound
    """
    return min(upper, max(lower, candidate))


def fraction_to_volume(fraction: float, max_volume: int) -> int:
    """Convert a slider position (0.0-1.0) to absolute stream units.

    The result is truncated, not rounded.
    """
    return int(max_volume * fraction)
