"""Object-style access to nested dicts and lists, without copying them."""

import logging

from typing import Optional

from .base import Wrapped, unwrap
from .errors import NotFound, ProxyError, TypeMismatch, ValidationError
from .kinds import Kind, OPAQUE_KINDS, classify
from .options import DEFAULT_NOWRAP, Options, should_wrap
from .passthrough import (CodeWrapper, HandleWrapper, OpaqueWrapper, PassthroughWrapper,
                          RegexWrapper, ScalarRefWrapper)
from .proxy import ContainerProxy, MappingProxy, SequenceProxy, make_proxy, wrap


__version__ = "0.1.0"

log = logging.getLogger(__name__)


def construct(root, options: Optional[Options] = None):
    """
    Wrap a dict or a list (or any other mapping or sequence).

    >>> o = construct({"foo": {"bar": "Hello World!"}})
    >>> o.foo.bar
    'Hello World!'
    """
    if isinstance(root, ContainerProxy):
        return root
    if isinstance(root, Wrapped):
        raise ValidationError(f"not a valid root to wrap: {type(root).__name__}")

    kind = classify(root)
    if kind not in (Kind.MAPPING, Kind.SEQUENCE):
        raise ValidationError(f"not a valid root to wrap: {type(root).__name__} ({kind})")

    if options is None:
        options = Options()
    if options.raw_access:
        return root

    log.debug("wrapping %s root of type %s", kind, type(root).__name__)
    return make_proxy(root, kind, options)


__all__ = [
    "CodeWrapper", "ContainerProxy", "DEFAULT_NOWRAP", "HandleWrapper", "Kind", "MappingProxy",
    "NotFound", "OPAQUE_KINDS", "OpaqueWrapper", "Options", "PassthroughWrapper", "ProxyError",
    "RegexWrapper", "ScalarRefWrapper", "SequenceProxy", "TypeMismatch", "ValidationError",
    "Wrapped", "classify", "construct", "make_proxy", "should_wrap", "unwrap", "wrap",
]
