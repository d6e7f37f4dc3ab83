"""Shared BDD fixtures and step definitions for the Ledger domain."""

import pytest
from ledger.record.initialization import InitializeRecord
from ledger.record.pricing import UpdatePrice
from ledger.record.record import InventoryRecord
from ledger.record.restocking import AddStock
from protean import current_domain
from pytest_bdd import given, parsers, then

OWNER = "a1" * 32
BUYER = "b2" * 32


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def address():
    return "rec-001"


@pytest.fixture()
def context():
    """Collects the outcome of the When step."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the owner initialized a record with {stock:d} units at {price:d} each"))
def _(address, stock, price):
    current_domain.process(
        InitializeRecord(address=address, caller=OWNER, initial_stock=stock, initial_price=price),
        asynchronous=False,
    )


@given(parsers.cfparse("the buyer has {balance:d} in their funding account"))
def _(transfer_service, balance):
    transfer_service.open_account(BUYER, balance=balance)


@given(parsers.cfparse("the owner added {amount:d} units"))
def _(address, amount):
    current_domain.process(AddStock(address=address, caller=OWNER, amount=amount), asynchronous=False)


@given(parsers.cfparse("the owner set the price to {price:d}"))
def _(address, price):
    current_domain.process(UpdatePrice(address=address, caller=OWNER, new_price=price), asynchronous=False)


@given("the transfer service declines transfers")
def _(transfer_service):
    transfer_service.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the record holds {stock:d} units"))
def _(address, stock):
    assert current_domain.repository_for(InventoryRecord).get(address).stock == stock


@then(parsers.cfparse("the record price is {price:d}"))
def _(address, price):
    assert current_domain.repository_for(InventoryRecord).get(address).price == price


@then(parsers.cfparse("the invocation fails with {code}"))
def _(context, code):
    assert "error" in context, f"Expected {code}, got result {context.get('result')}"
    assert context["error"].code == code


@then("the record is owned by the owner")
def _(address):
    assert current_domain.repository_for(InventoryRecord).get(address).owner == OWNER


@then(parsers.cfparse("the owner has received {amount:d}"))
def _(transfer_service, amount):
    assert transfer_service.balance_of(OWNER) == amount


@then(parsers.cfparse("the buyer still has {balance:d}"))
def _(transfer_service, balance):
    assert transfer_service.balance_of(BUYER) == balance
