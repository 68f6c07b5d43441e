"""Tests for the Receipt accumulator."""

from datetime import datetime

import pytest

from supermarket.receipt import Receipt


@pytest.fixture
def receipt():
    return Receipt()


def test_new_receipt_is_empty(receipt):
    assert receipt.is_empty()
    assert receipt.total == 0.0
    assert len(receipt) == 0


def test_add_item_accumulates_total(receipt):
    items = [("Milk", 4, 2.5), ("Bread", 2, 1.75), ("Tea", 1, 3.2)]
    for name, qty, price in items:
        receipt.add_item(name, qty, price)

    assert not receipt.is_empty()
    assert len(receipt) == 3
    assert receipt.total == pytest.approx(sum(q * p for _, q, p in items))
    assert [line.name for line in receipt.items] == ["Milk", "Bread", "Tea"]


def test_add_item_takes_values_as_given(receipt):
    receipt.add_item("Refund", -1, 5.0)
    assert receipt.total == -5.0


def test_clear_resets(receipt):
    receipt.add_item("Milk", 4, 2.5)
    receipt.clear()
    assert receipt.is_empty()
    assert receipt.total == 0.0
    assert receipt.items == ()


def test_clear_on_empty_receipt(receipt):
    receipt.clear()
    assert receipt.is_empty()
    assert receipt.total == 0.0


def test_export_snapshot(receipt):
    receipt.add_item("Milk", 40, 2.5)
    receipt.add_item("Bread", 3, 1.25)

    text = receipt.export_snapshot(now=datetime(2025, 1, 10, 9, 5, 0))

    assert text == (
        "===== RECEIPT =====\n"
        "Timestamp: 20250110_090500\n"
        "-------------------\n"
        "Milk x40 @ 2.5 = 100\n"
        "Bread x3 @ 1.25 = 3.75\n"
        "-------------------\n"
        "Total: 103.75\n"
        "===================\n"
    )


def test_export_to_file(receipt, tmp_path):
    receipt.add_item("Milk", 2, 2.5)
    path = receipt.export_to_file(tmp_path / "out" / "receipt.txt")
    assert path.exists()
    assert "Total: 5" in path.read_text(encoding="utf-8")
