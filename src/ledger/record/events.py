"""Domain events for the InventoryRecord aggregate.

Raised by the aggregate and dispatched only when the unit of work commits, so
an aborted invocation never publishes any of them.
"""

from protean.fields import DateTime, Identifier, Integer

from ledger.domain import ledger


@ledger.event(part_of="InventoryRecord")
class RecordInitialized:
    """A record was created at an address with a permanent owner."""

    __version__ = 1

    address = Identifier(required=True)
    owner = Identifier(required=True)
    initial_stock = Integer()  # Not required: zero is a valid opening stock
    initial_price = Integer(required=True)
    initialized_at = DateTime(required=True)


@ledger.event(part_of="InventoryRecord")
class StockAdded:
    """The owner added units to the record."""

    __version__ = 1

    address = Identifier(required=True)
    amount = Integer(required=True)
    previous_stock = Integer()
    new_stock = Integer(required=True)
    added_at = DateTime(required=True)


@ledger.event(part_of="InventoryRecord")
class PriceUpdated:
    """The owner changed the unit price."""

    __version__ = 1

    address = Identifier(required=True)
    previous_price = Integer(required=True)
    new_price = Integer(required=True)
    updated_at = DateTime(required=True)


@ledger.event(part_of="InventoryRecord")
class UnitsSold:
    """Units were sold to a buyer and the sale was settled."""

    __version__ = 1

    address = Identifier(required=True)
    buyer = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Integer(required=True)
    total_due = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer()
    sold_at = DateTime(required=True)
