"""kinds.py"""

import io
import numbers
import re
import socket
import weakref

from collections.abc import Mapping, Sequence
from enum import Enum

import numpy as np


class Kind(Enum):
    MAPPING    = "mapping"
    SEQUENCE   = "sequence"
    CODE       = "code"
    SCALAR_REF = "scalar_ref"
    REGEX      = "regex"
    HANDLE     = "handle"
    OTHER      = "other"
    SCALAR     = "scalar"

    @property
    def opaque(self) -> bool:
        return self not in (Kind.MAPPING, Kind.SEQUENCE, Kind.SCALAR)

    def __str__(self):
        return self.value


OPAQUE_KINDS = frozenset(k for k in Kind if k.opaque)

SCALAR_TYPES     = (numbers.Number, str, bytes, bytearray, np.generic)
HANDLE_TYPES     = (io.IOBase, socket.socket)
SCALAR_REF_TYPES = (weakref.ref, memoryview)
# natively indexable, but not something to walk into
ARRAY_TYPES      = (np.ndarray, set, frozenset)


def classify(value) -> Kind:
    """Kind of a single value, without looking at what it contains."""
    # bool is a numbers.Number
    if value is None or isinstance(value, SCALAR_TYPES):
        return Kind.SCALAR
    if isinstance(value, re.Pattern):
        return Kind.REGEX
    if isinstance(value, HANDLE_TYPES):
        return Kind.HANDLE
    if isinstance(value, SCALAR_REF_TYPES):
        return Kind.SCALAR_REF
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Sequence):
        return Kind.SEQUENCE
    if isinstance(value, ARRAY_TYPES):
        return Kind.OTHER
    if callable(value):
        return Kind.CODE
    return Kind.OTHER
