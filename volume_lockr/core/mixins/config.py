"""Configuration mixin giving components access to LockrConfig."""

from ..config import LockrConfig

__all__ = [
    "ConfigMixin",
    "get_global_config",
    "set_global_config",
]

_global_config: LockrConfig = LockrConfig()


def get_global_config() -> LockrConfig:
    """Get the process-wide default configuration."""
    return _global_config


def set_global_config(config: LockrConfig) -> None:
    """Replace the process-wide default configuration.

    Objects created without an explicit config see the change on their next
    access to the config property.

    Args:
        config: The new global LockrConfig instance.
    """
    global _global_config
    if not isinstance(config, LockrConfig):
        raise TypeError(f"Expected LockrConfig, got {type(config).__name__}")
    _global_config = config


class ConfigMixin:
    """Mixin class providing a config property.

    Falls back to the global default (see get_global_config /
    set_global_config) when no config was passed at construction time.
    """

    def __init__(self, config: LockrConfig | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._config = config

    @property
    def config(self) -> LockrConfig:
        """Instance config if one was given, otherwise the current global one."""
        if self._config is None:
            return _global_config
        return self._config
