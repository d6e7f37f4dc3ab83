"""Restocking: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from ledger.domain import ledger
from ledger.record.authorization import authorize
from ledger.record.invocation import invocation
from ledger.record.record import InventoryRecord
from ledger.record.store import load_record, save_record


@ledger.command(part_of="InventoryRecord")
class AddStock:
    """Add units to a record. Owner only."""

    address = Identifier(required=True)
    caller = Identifier()
    amount = Integer()


@ledger.command_handler(part_of=InventoryRecord)
class AddStockHandler:
    @handle(AddStock)
    def add_stock(self, command):
        with invocation("AddStock", command.address, command.caller):
            record = load_record(command.address)
            authorize(record, command.caller)
            record.add_stock(command.amount)
            save_record(record)
            return record.to_summary()
