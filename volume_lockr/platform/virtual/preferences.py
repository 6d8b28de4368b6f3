"""Preference storage backed by a plain dict."""

from volume_lockr.core import BasePreferences

__all__ = [
    "DictPreferences",
]


class DictPreferences(BasePreferences):
    def __init__(self, values=None):
        self._values = dict(values or {})

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return bool(self._values.get(key, default))

    def put_boolean(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)
