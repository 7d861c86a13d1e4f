"""errors.py"""

from typing import Any, Optional


class ProxyError(Exception):
    pass


class ValidationError(ProxyError, TypeError):
    """The root handed to construct() is not a mapping or a sequence."""


class NotFound(ProxyError, KeyError):
    def __init__(self, key: Any, kind: Optional[Any] = None):
        super().__init__(key, kind)
        self.key  = key
        self.kind = kind

    def __str__(self):
        # KeyError would only show repr(key)
        if self.kind is None:
            return f"no such key {self.key!r}"
        return f"no such key {self.key!r} in {self.kind} proxy"


class TypeMismatch(ProxyError, TypeError):
    pass
