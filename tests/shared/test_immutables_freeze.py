from types import MappingProxyType
from decimal import Decimal
from enum import Enum, auto

import pytest

from payrate.domain.conversion import ConversionDirection
from payrate.shared.utils.immutables import freeze


class E(Enum):
    A = auto()


def test_freeze_scalars():
    assert freeze(None) is None
    assert freeze(2080) == 2080
    assert freeze(Decimal("20.5")) == Decimal("20.5")
    assert freeze(E.A) is E.A
    assert freeze(ConversionDirection.HOURLY) is ConversionDirection.HOURLY
    assert freeze("hour") == "hour"
    assert freeze(b"x") == b"x"


def test_freeze_dict_nested():
    src = {"hourly": {"labels": ["hour", "year"], "meta": {"factor": 2080}}, "modes": {"hourly", "salary"}}
    frozen = freeze(src)
    assert isinstance(frozen, MappingProxyType)
    assert isinstance(frozen["hourly"], MappingProxyType)
    assert type(frozen["hourly"]["labels"]) is tuple
    assert isinstance(frozen["hourly"]["meta"], MappingProxyType)
    assert type(frozen["modes"]) is frozenset


def test_freeze_list_tuple_set():
    assert freeze([1, 2, 3]) == (1, 2, 3)
    assert freeze((1, [2, 3])) == (1, (2, 3))
    assert freeze({1, 2, 3}) == frozenset({1, 2, 3})


def test_freeze_immutability_enforced():
    frozen = freeze({"a": 1, "b": [2, 3]})
    with pytest.raises(TypeError):
        frozen["a"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        frozen["b"][0] = 9  # type: ignore[index]


def test_freeze_returns_new_proxy_not_source():
    src = {"a": 1}
    frozen = freeze(src)
    src["a"] = 2
    assert frozen["a"] == 1
