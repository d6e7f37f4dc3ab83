"""Sales: command and handler.

The stock decrement and the payment to the owner form one unit. The handler
computes the new stock and the amount due on the loaded aggregate, settles,
and saves the record only once settlement has succeeded. Any failure raises
before ``save_record`` and the unit of work throws the tentative state away,
so the stored record is untouched.
"""

from protean import handle
from protean.fields import Identifier, Integer

from ledger.domain import ledger
from ledger.record.authorization import parse_identity
from ledger.record.invocation import invocation
from ledger.record.record import InventoryRecord
from ledger.record.store import ensure_storable, load_record, save_record
from ledger.settlement.bridge import settle


@ledger.command(part_of="InventoryRecord")
class Sell:
    """Sell units to a buyer, who pays the owner through the transfer service."""

    address = Identifier(required=True)
    buyer = Identifier()
    quantity = Integer()


@ledger.command_handler(part_of=InventoryRecord)
class SellHandler:
    @handle(Sell)
    def sell(self, command):
        with invocation("Sell", command.address, command.buyer) as log:
            buyer = parse_identity(command.buyer, field="buyer")
            record = load_record(command.address)

            total_due = record.compute_sale(quantity=command.quantity, buyer=buyer)
            log.info("Sale computed", quantity=command.quantity, total_due=total_due)
            ensure_storable(record)

            settle(buyer=buyer, owner=record.owner, total_due=total_due)
            save_record(record)

            summary = record.to_summary()
            summary["total_due"] = total_due
            return summary
