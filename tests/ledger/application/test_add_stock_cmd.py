"""Application tests for AddStock via current_domain.process()."""

import pytest
from ledger.errors import InvalidAmount, Overflow, RecordNotFound, Unauthorized
from ledger.record.initialization import InitializeRecord
from ledger.record.record import U64_MAX, InventoryRecord
from ledger.record.restocking import AddStock
from protean import current_domain

OWNER = "a1" * 32
STRANGER = "c3" * 32


def _initialize(**overrides):
    defaults = {"address": "rec-001", "caller": OWNER, "initial_stock": 100}
    defaults.update(overrides)
    current_domain.process(InitializeRecord(**defaults), asynchronous=False)


def _add_stock(amount, caller=OWNER, address="rec-001"):
    return current_domain.process(AddStock(address=address, caller=caller, amount=amount), asynchronous=False)


def _stock():
    return current_domain.repository_for(InventoryRecord).get("rec-001").stock


class TestAddStockCommand:
    def test_owner_adds_stock(self):
        _initialize()
        result = _add_stock(50)
        assert result["stock"] == 150
        assert _stock() == 150

    def test_stranger_is_rejected_and_stock_unchanged(self):
        _initialize()
        with pytest.raises(Unauthorized):
            _add_stock(50, caller=STRANGER)
        assert _stock() == 100

    def test_zero_amount_is_invalid(self):
        _initialize()
        with pytest.raises(InvalidAmount):
            _add_stock(0)
        assert _stock() == 100

    def test_overflow_leaves_stock_at_limit(self):
        _initialize(initial_stock=U64_MAX)
        with pytest.raises(Overflow):
            _add_stock(1)
        assert _stock() == U64_MAX

    def test_unknown_address_is_not_found(self):
        with pytest.raises(RecordNotFound):
            _add_stock(10, address="missing")
