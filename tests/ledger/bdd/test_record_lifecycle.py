"""BDD tests for the inventory record lifecycle."""

from ledger.errors import LedgerError
from ledger.record.initialization import InitializeRecord
from ledger.record.pricing import UpdatePrice
from ledger.record.restocking import AddStock
from ledger.record.sale import Sell
from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when

OWNER = "a1" * 32
BUYER = "b2" * 32
STRANGER = "c3" * 32

scenarios("features/record_lifecycle.feature")


def run(context, command):
    """Process a command, keeping either its result or the LedgerError it raised."""
    try:
        context["result"] = current_domain.process(command, asynchronous=False)
    except LedgerError as exc:
        context["error"] = exc


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the owner adds {amount:d} units"))
def _(context, address, amount):
    run(context, AddStock(address=address, caller=OWNER, amount=amount))


@when(parsers.cfparse("a stranger adds {amount:d} units"))
def _(context, address, amount):
    run(context, AddStock(address=address, caller=STRANGER, amount=amount))


@when(parsers.cfparse("the owner sets the price to {price:d}"))
def _(context, address, price):
    run(context, UpdatePrice(address=address, caller=OWNER, new_price=price))


@when(parsers.cfparse("the buyer buys {quantity:d} units"))
def _(context, address, quantity):
    run(context, Sell(address=address, buyer=BUYER, quantity=quantity))


@when("a stranger initializes the same record")
def _(context, address):
    run(context, InitializeRecord(address=address, caller=STRANGER))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the buyer owes {amount:d}"))
def _(context, amount):
    assert "error" not in context, context.get("error")
    assert context["result"]["total_due"] == amount
