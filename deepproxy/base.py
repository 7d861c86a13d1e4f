"""base.py"""

from typing import Any


class Wrapped(object):
    """Anything minted by this package. Holds the raw value and nothing else of its own."""

    __slots__ = ("_raw",)

    def __init__(self, raw):
        object.__setattr__(self, "_raw", raw)

    def unwrap(self):
        return self._raw


def unwrap(value) -> Any:
    if isinstance(value, Wrapped):
        return value._raw
    return value
