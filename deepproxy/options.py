"""options.py"""

import logging

from contextlib import contextmanager
from typing import Iterable, Optional

from .base import Wrapped
from .kinds import Kind, OPAQUE_KINDS, classify


log = logging.getLogger(__name__)

# disable these at your peril
DEFAULT_NOWRAP = OPAQUE_KINDS


class Options(object):
    """
    Switches for one wrapped tree.

    Every proxy reached from the same root shares this object and reads it on
    every access, so changing a field takes effect on the next read.

    raw_access:      reads return the stored values as they are, construct()
                     returns its input
    allow_undefined: get() and attribute reads of a missing key return None
                     instead of raising
    nowrap:          kinds that are handed back untouched instead of wrapped
    """

    FIELDS = ("raw_access", "allow_undefined", "nowrap")

    def __init__(self, raw_access: bool = False, allow_undefined: bool = False,
                 nowrap: Optional[Iterable[Kind]] = None):
        self.raw_access      = raw_access
        self.allow_undefined = allow_undefined
        self.nowrap          = set(DEFAULT_NOWRAP if nowrap is None else nowrap)

    def copy(self) -> "Options":
        return Options(self.raw_access, self.allow_undefined, self.nowrap)

    @contextmanager
    def override(self, **changes):
        """Temporarily change some fields, restoring them on the way out."""
        for name in changes:
            if name not in self.FIELDS:
                raise TypeError(f"unknown option {name!r}")

        saved = {name: getattr(self, name) for name in changes}
        log.debug("overriding options %s", changes)

        for name, value in changes.items():
            if name == "nowrap":
                value = set(value)
            setattr(self, name, value)

        try:
            yield self
        finally:
            for name, value in saved.items():
                setattr(self, name, value)
            log.debug("restored options %s", saved)

    def __repr__(self):
        nowrap = sorted(str(k) for k in self.nowrap)
        return (f"Options(raw_access={self.raw_access}, "
                f"allow_undefined={self.allow_undefined}, nowrap={nowrap})")


def should_wrap(value, nowrap: Iterable[Kind] = DEFAULT_NOWRAP) -> bool:
    # no truthiness test: an empty dict is still a container
    if value is None:
        return False
    if isinstance(value, Wrapped):
        return False

    kind = classify(value)
    if kind is Kind.SCALAR:
        return False
    if kind in nowrap:
        return False
    return True
