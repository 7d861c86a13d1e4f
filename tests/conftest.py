from __future__ import annotations

import pytest

from deepproxy import Options


@pytest.fixture
def options() -> Options:
    return Options()


@pytest.fixture
def nested() -> dict:
    return {
        "name": "LCR",
        "recipes": [
            {"dur": 16, "eut": 384, "inputs": [{"uN": "H", "a": 3000}, {"uN": "N", "a": 1000}]},
            {"dur": 16, "eut": 30, "inputs": [{"uN": "NH3", "a": 1000}]},
        ],
        "tiers": {"lv": {"voltage": 32}, "mv": {"voltage": 128}},
    }
