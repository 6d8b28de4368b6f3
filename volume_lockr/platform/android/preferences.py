"""Default SharedPreferences access."""

from volume_lockr.core import BasePreferences

from ._android_api import PreferenceManager, get_context

__all__ = [
    "AndroidPreferences",
]


class AndroidPreferences(BasePreferences):
    """Reads the application's default SharedPreferences on every call."""

    def get_boolean(self, key: str, default: bool = False) -> bool:
        preferences = PreferenceManager.getDefaultSharedPreferences(get_context())
        return bool(preferences.getBoolean(key, default))
