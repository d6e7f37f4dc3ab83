"""Price updates: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from ledger.domain import ledger
from ledger.record.authorization import authorize
from ledger.record.invocation import invocation
from ledger.record.record import InventoryRecord
from ledger.record.store import load_record, save_record


@ledger.command(part_of="InventoryRecord")
class UpdatePrice:
    """Set a new unit price on a record. Owner only."""

    address = Identifier(required=True)
    caller = Identifier()
    new_price = Integer()


@ledger.command_handler(part_of=InventoryRecord)
class UpdatePriceHandler:
    @handle(UpdatePrice)
    def update_price(self, command):
        with invocation("UpdatePrice", command.address, command.caller):
            record = load_record(command.address)
            authorize(record, command.caller)
            record.update_price(command.new_price)
            save_record(record)
            return record.to_summary()
