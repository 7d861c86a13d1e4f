from __future__ import annotations

import copy
import pickle

from deepproxy import Kind, NotFound, ProxyError


def test_not_found_message() -> None:
    exc = NotFound("tier", Kind.MAPPING)
    assert exc.key == "tier"
    assert exc.kind is Kind.MAPPING
    assert str(exc) == "no such key 'tier' in mapping proxy"
    assert str(NotFound("tier")) == "no such key 'tier'"
    assert isinstance(exc, KeyError) and isinstance(exc, ProxyError)


def test_not_found_survives_pickle_and_copy() -> None:
    exc = NotFound("tier", Kind.MAPPING)
    for clone in (pickle.loads(pickle.dumps(exc)), copy.copy(exc)):
        assert clone.key == "tier"
        assert clone.kind is Kind.MAPPING
        assert str(clone) == str(exc)
