"""passthrough.py"""

from typing import Dict, Type

from .base import Wrapped
from .errors import TypeMismatch
from .kinds import Kind


class PassthroughWrapper(Wrapped):
    """
    Hands back an opaque value through unwrap() and nothing else.

    Only minted when a kind is taken out of Options.nowrap.
    """

    __slots__ = ()

    kind = Kind.OTHER

    def __getattr__(self, name):
        # copy probes for dunders
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        raise TypeMismatch(f"no member access on a wrapped {self.kind} value ({name!r})")

    def __setattr__(self, name, value):
        # copy restores the slot through setattr
        if name == "_raw":
            object.__setattr__(self, name, value)
            return
        raise TypeMismatch(f"no member access on a wrapped {self.kind} value ({name!r})")

    def __getitem__(self, key):
        raise TypeMismatch(f"no index access on a wrapped {self.kind} value ({key!r})")

    def __setitem__(self, key, value):
        raise TypeMismatch(f"no index access on a wrapped {self.kind} value ({key!r})")

    def __repr__(self):
        return f"{type(self).__name__}({self._raw!r})"


class CodeWrapper(PassthroughWrapper):
    __slots__ = ()

    kind = Kind.CODE

    def __call__(self, *args, **kwargs):
        return self._raw(*args, **kwargs)


class ScalarRefWrapper(PassthroughWrapper):
    __slots__ = ()

    kind = Kind.SCALAR_REF


class RegexWrapper(PassthroughWrapper):
    __slots__ = ()

    kind = Kind.REGEX


class HandleWrapper(PassthroughWrapper):
    __slots__ = ()

    kind = Kind.HANDLE


class OpaqueWrapper(PassthroughWrapper):
    __slots__ = ()

    kind = Kind.OTHER


PASSTHROUGH: Dict[Kind, Type[PassthroughWrapper]] = {
    Kind.CODE:       CodeWrapper,
    Kind.SCALAR_REF: ScalarRefWrapper,
    Kind.REGEX:      RegexWrapper,
    Kind.HANDLE:     HandleWrapper,
    Kind.OTHER:      OpaqueWrapper,
}
