"""proxy.py"""

import logging

from collections.abc import MutableMapping, MutableSequence
from typing import Any, Iterable, List, Optional

from .base import Wrapped, unwrap
from .errors import NotFound, TypeMismatch
from .kinds import Kind, classify
from .options import Options, should_wrap
from .passthrough import PASSTHROUGH


log = logging.getLogger(__name__)

_SLOTS = ("_raw", "_options")


def _dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class ContainerProxy(Wrapped):
    """Shared read path of the mapping and sequence proxies."""

    __slots__ = ("_options",)

    def __init__(self, raw, options: Optional[Options] = None):
        super().__init__(raw)
        object.__setattr__(self, "_options", options if options is not None else Options())

    def _read(self, value):
        return wrap(value, self._options)

    def size(self) -> int:
        return len(self._raw)

    def __len__(self):
        return len(self._raw)

    def __eq__(self, other):
        return self._raw == unwrap(other)

    __hash__ = None  # type: ignore

    def __repr__(self):
        return f"{type(self).__name__}({self._raw!r})"


class MappingProxy(ContainerProxy, MutableMapping):
    """
    Object-style access to a mapping: p.foo, p["foo"] and p.get("foo") all
    read the same key. Nested mappings and sequences come back wrapped,
    everything else as stored. Writes store the value itself, never a proxy.

    Keys that share a name with a method (get, items, ...) or a dunder are
    only reachable through get()/set() or indexing.
    """

    __slots__ = ()

    kind = Kind.MAPPING

    def get(self, key, *default):
        # test first, a defaultdict would grow the key on a plain lookup
        if key in self._raw:
            return self._read(self._raw[key])

        if default:
            return default[0]
        if self._options.allow_undefined:
            return None
        raise NotFound(key, self.kind)

    def set(self, key, value):
        self._raw[key] = unwrap(value)

    def exists(self, key) -> bool:
        return key in self._raw

    def delete(self, key):
        """Remove key and return what was stored there, unwrapped."""
        if key not in self._raw:
            raise NotFound(key, self.kind)

        value = self._raw[key]
        del self._raw[key]
        return value

    def clear(self):
        self._raw.clear()

    def pop(self, key, *default):
        if key not in self._raw and default:
            return default[0]
        return self.delete(key)

    def popitem(self):
        return self._raw.popitem()

    def setdefault(self, key, default=None):
        if key not in self._raw:
            self.set(key, default)
        return self.get(key)

    def __getitem__(self, key):
        if key not in self._raw:
            raise NotFound(key, self.kind)
        return self._read(self._raw[key])

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def __contains__(self, key):
        return key in self._raw

    def __iter__(self):
        return iter(self._raw)

    def __getattr__(self, name):
        # slots not set yet (unpickling) and dunder probes must not turn into key reads
        if name in _SLOTS or _dunder(name):
            raise AttributeError(name)

        try:
            return self.get(name)
        except NotFound as exc:
            raise AttributeError(name) from exc

    def __setattr__(self, name, value):
        if name in _SLOTS:
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name):
        try:
            self.delete(name)
        except NotFound as exc:
            raise AttributeError(name) from exc

    def __dir__(self):
        names = set(super().__dir__())
        names.update(k for k in self._raw if isinstance(k, str) and k.isidentifier())
        return sorted(names)


class SequenceProxy(ContainerProxy, MutableSequence):
    """
    Index access to a sequence with the same wrap-on-read, unwrap-on-write
    rules as MappingProxy, plus the primitives of a dynamic array.

    Structural operations (pop, shift, delete, splice) hand back the stored
    values unwrapped.
    """

    __slots__ = ()

    kind = Kind.SEQUENCE

    def exists(self, index: int) -> bool:
        size = len(self._raw)
        return -size <= index < size

    def get(self, index: int, *default):
        if self.exists(index):
            return self._read(self._raw[index])

        # a missing position reads as absent, like a dynamic array
        return default[0] if default else None

    def set(self, index: int, value):
        """Store value at index, padding with None when index is past the end."""
        size = len(self._raw)
        if index >= size:
            self._raw.extend([None] * (index - size + 1))
        self._raw[index] = unwrap(value)

    def resize(self, size: int):
        if size < 0:
            raise ValueError(f"cannot resize to {size}")

        current = len(self._raw)
        if size < current:
            for _ in range(current - size):
                self._raw.pop()
        else:
            self._raw.extend([None] * (size - current))

    def delete(self, index: int):
        value = self._raw[index]
        del self._raw[index]
        return value

    def clear(self):
        self._raw.clear()

    def append(self, *values):
        for value in values:
            self._raw.append(unwrap(value))

    def extend(self, values: Iterable):
        self._raw.extend([unwrap(v) for v in values])

    def insert(self, index: int, value):
        self._raw.insert(index, unwrap(value))

    def pop(self, index: int = -1):
        # deque.pop takes no index
        if index == -1:
            return self._raw.pop()
        return self.delete(index)

    def shift(self):
        return self.delete(0)

    def unshift(self, *values):
        for value in reversed(values):
            self._raw.insert(0, unwrap(value))

    def reverse(self):
        self._raw.reverse()

    def splice(self, offset: int = 0, length: Optional[int] = None, *values) -> List[Any]:
        """
        Remove length elements starting at offset, put values in their place
        and return the removed elements.

        A negative offset counts from the end. Without a length everything
        from offset on is removed; a negative length leaves that many
        elements at the end.
        """
        size = len(self._raw)

        if offset < 0:
            offset += size
        if offset < 0:
            raise IndexError(f"splice offset {offset - size} out of range")
        offset = min(offset, size)

        if length is None:
            end = size
        elif length < 0:
            end = max(size + length, offset)
        else:
            end = min(offset + length, size)

        # nothing above touches the sequence; plain index operations only,
        # not every mutable sequence takes slices
        removed = [self._raw[i] for i in range(offset, end)]
        for _ in removed:
            del self._raw[offset]
        for i, value in enumerate(values):
            self._raw.insert(offset + i, unwrap(value))
        return removed

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._read(self._raw[i]) for i in range(*index.indices(len(self._raw)))]
        return self._read(self._raw[index])

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            self._raw[index] = [unwrap(v) for v in value]
        else:
            self._raw[index] = unwrap(value)

    def __delitem__(self, index):
        del self._raw[index]

    def __contains__(self, value):
        return unwrap(value) in self._raw

    def __iter__(self):
        # re-check the size every step, the sequence may change under us
        i = 0
        while i < len(self._raw):
            yield self._read(self._raw[i])
            i += 1


def make_proxy(container, kind: Kind, options: Optional[Options] = None) -> Wrapped:
    if isinstance(container, Wrapped):
        return container

    if kind is Kind.MAPPING:
        return MappingProxy(container, options)
    if kind is Kind.SEQUENCE:
        return SequenceProxy(container, options)
    if isinstance(kind, Kind) and kind.opaque:
        log.debug("passing through %s value of type %s", kind, type(container).__name__)
        return PASSTHROUGH[kind](container)

    raise TypeMismatch(f"cannot wrap a {kind} value of type {type(container).__name__}")


def wrap(value, options: Optional[Options] = None) -> Any:
    """What a read hands back: a fresh proxy for containers, the value itself otherwise."""
    if options is None:
        options = Options()

    if options.raw_access:
        return value
    if not should_wrap(value, options.nowrap):
        return value
    return make_proxy(value, classify(value), options)
