"""Tests for computing a sale on a record."""

import pytest
from ledger.errors import InsufficientStock, InvalidAmount, Overflow
from ledger.record.events import UnitsSold
from ledger.record.record import U64_MAX, InventoryRecord

OWNER = "a1" * 32
BUYER = "b2" * 32


def _make_record(**overrides):
    defaults = {
        "address": "rec-001",
        "owner": OWNER,
        "initial_stock": 100,
        "initial_price": 1_000_000,
    }
    defaults.update(overrides)
    return InventoryRecord.initialize(**defaults)


class TestComputeSale:
    def test_returns_quantity_times_price(self):
        record = _make_record(initial_price=2_000_000)
        total_due = record.compute_sale(quantity=10, buyer=BUYER)
        assert total_due == 20_000_000

    def test_decreases_stock_by_quantity(self):
        record = _make_record(initial_stock=150)
        record.compute_sale(quantity=10, buyer=BUYER)
        assert record.stock == 140

    def test_selling_everything_leaves_zero(self):
        record = _make_record(initial_stock=3)
        record.compute_sale(quantity=3, buyer=BUYER)
        assert record.stock == 0

    def test_raises_units_sold_event(self):
        record = _make_record(initial_stock=100, initial_price=5)
        record.compute_sale(quantity=4, buyer=BUYER)
        events = [e for e in record._events if isinstance(e, UnitsSold)]
        assert len(events) == 1
        event = events[0]
        assert event.buyer == BUYER
        assert event.quantity == 4
        assert event.unit_price == 5
        assert event.total_due == 20
        assert event.previous_stock == 100
        assert event.new_stock == 96

    def test_quantity_above_stock_is_insufficient(self):
        record = _make_record(initial_stock=140)
        with pytest.raises(InsufficientStock) as exc_info:
            record.compute_sale(quantity=1000, buyer=BUYER)
        assert "quantity" in exc_info.value.messages
        assert record.stock == 140

    def test_any_sale_against_empty_stock_is_insufficient(self):
        record = _make_record(initial_stock=0)
        with pytest.raises(InsufficientStock):
            record.compute_sale(quantity=1, buyer=BUYER)

    @pytest.mark.parametrize("quantity", [0, -1, None])
    def test_non_positive_quantity_is_invalid(self, quantity):
        record = _make_record()
        with pytest.raises(InvalidAmount):
            record.compute_sale(quantity=quantity, buyer=BUYER)
        assert record.stock == 100

    def test_total_due_overflow_is_rejected_without_change(self):
        record = _make_record(initial_stock=10, initial_price=U64_MAX // 2)
        record._events.clear()
        with pytest.raises(Overflow):
            record.compute_sale(quantity=3, buyer=BUYER)
        assert record.stock == 10
        assert record._events == []

    def test_total_due_exactly_at_limit_is_allowed(self):
        record = _make_record(initial_stock=1, initial_price=U64_MAX)
        assert record.compute_sale(quantity=1, buyer=BUYER) == U64_MAX
