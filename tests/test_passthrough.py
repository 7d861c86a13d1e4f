from __future__ import annotations

import copy
import io
import re
import weakref

import numpy as np
import pytest

from deepproxy import (CodeWrapper, HandleWrapper, Kind, OpaqueWrapper, Options,
                       PassthroughWrapper, RegexWrapper, ScalarRefWrapper, TypeMismatch, construct,
                       make_proxy)


def greet(name):
    return f"Hello {name}"


def test_code_is_returned_as_is() -> None:
    o = construct({"fn": greet})
    assert o.fn is greet
    assert o.fn("Bob") == "Hello Bob"


def test_opaque_values_are_returned_as_is() -> None:
    pattern = re.compile("a+")
    handle = io.StringIO()
    array = np.arange(3)
    o = construct({"re": pattern, "fh": handle, "arr": array})
    assert o.re is pattern
    assert o.fh is handle
    assert o.arr is array


def test_code_wrapper_when_kind_is_allowed() -> None:
    options = Options()
    options.nowrap.discard(Kind.CODE)
    o = construct({"fn": greet}, options)

    fn = o.fn
    assert isinstance(fn, CodeWrapper)
    assert fn.unwrap() is greet
    assert fn("Ann") == "Hello Ann"


def test_wrapper_refuses_member_and_index_access() -> None:
    w = make_proxy(re.compile("x"), Kind.REGEX)
    assert isinstance(w, RegexWrapper)
    with pytest.raises(TypeMismatch):
        w.pattern
    with pytest.raises(TypeMismatch):
        w[0]
    with pytest.raises(TypeMismatch):
        w.flags = 0
    with pytest.raises(TypeMismatch):
        w[0] = 1
    # dunder probes stay ordinary misses
    assert not hasattr(w, "__deepcopy__")


def test_factory_dispatch() -> None:
    assert isinstance(make_proxy(io.BytesIO(), Kind.HANDLE), HandleWrapper)
    assert isinstance(make_proxy(object(), Kind.OTHER), OpaqueWrapper)
    assert isinstance(make_proxy(object(), Kind.OTHER), PassthroughWrapper)
    with pytest.raises(TypeMismatch):
        make_proxy(1, Kind.SCALAR)
    with pytest.raises(TypeMismatch):
        make_proxy({}, "mapping")


def test_factory_is_idempotent() -> None:
    w = make_proxy(greet, Kind.CODE)
    assert make_proxy(w, Kind.CODE) is w


class Target:
    pass


def test_scalar_ref_and_handle_dispatch() -> None:
    target = Target()
    ref = weakref.ref(target)
    w = make_proxy(ref, Kind.SCALAR_REF)
    assert isinstance(w, ScalarRefWrapper)
    assert w.unwrap() is ref

    view = memoryview(b"abc")
    assert make_proxy(view, Kind.SCALAR_REF).unwrap() is view

    handle = io.StringIO()
    assert make_proxy(handle, Kind.HANDLE).unwrap() is handle


def test_scalar_ref_and_handle_reads() -> None:
    target = Target()
    ref = weakref.ref(target)
    handle = io.BytesIO(b"data")
    data = {"ref": ref, "fh": handle}

    assert construct(data).ref is ref
    assert construct(data).fh is handle

    options = Options()
    options.nowrap -= {Kind.SCALAR_REF, Kind.HANDLE}
    o = construct(data, options)

    wrapped_ref = o.ref
    assert isinstance(wrapped_ref, ScalarRefWrapper)
    assert wrapped_ref.unwrap()() is target
    with pytest.raises(TypeMismatch):
        wrapped_ref[0]

    wrapped_fh = o.fh
    assert isinstance(wrapped_fh, HandleWrapper)
    assert wrapped_fh.unwrap().read() == b"data"
    with pytest.raises(TypeMismatch):
        wrapped_fh.read


def test_wrappers_can_be_copied() -> None:
    w = make_proxy(len, Kind.CODE)
    clone = copy.copy(w)
    assert isinstance(clone, CodeWrapper)
    assert clone is not w
    assert clone.unwrap() is len
    assert clone([1, 2]) == 2
