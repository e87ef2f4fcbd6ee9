from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

import expense_tracker.data_model.transaction as tx
from expense_tracker.data_model import ITransaction, IToDict, Transaction


@pytest.fixture
def fixed_clock(monkeypatch):
    monkeypatch.setattr(tx, "_now", lambda: datetime(2025, 10, 28, 14, 30, 59))


def test_fields_and_timestamp_format(fixed_clock):
    t = Transaction(50.0, "food")
    assert t.amount == 50.0
    assert t.category == "food"
    assert t.timestamp == "28-10-2025 14:30"


def test_category_kept_as_supplied(fixed_clock):
    assert Transaction(10, "FoOd").category == "FoOd"


def test_timestamp_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Transaction(10, "food", "01-01-2000 00:00")  # type: ignore[call-arg]


def test_timestamp_assigned_once(monkeypatch):
    calls = []

    def _clock():
        calls.append(1)
        return datetime(2024, 1, 2, 3, 4)

    monkeypatch.setattr(tx, "_now", _clock)
    t = Transaction(10, "food")
    _ = (t.timestamp, t.timestamp)
    assert t.timestamp == "02-01-2024 03:04"
    assert len(calls) == 1


@pytest.mark.parametrize("attr,value", [("amount", 1.0), ("category", "bills"), ("timestamp", "x")])
def test_is_immutable(attr, value):
    t = Transaction(10, "food")
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(t, attr, value)


def test_equality_is_identity():
    a = Transaction(50.0, "food")
    b = Transaction(50.0, "food")
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_to_dict_and_protocols(fixed_clock):
    t = Transaction(12.5, "travel")
    assert t.to_dict() == {"amount": "12.5", "category": "travel", "timestamp": "28-10-2025 14:30"}
    assert isinstance(t, ITransaction)
    assert isinstance(t, IToDict)
