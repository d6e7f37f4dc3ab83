"""Record initialization: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from ledger.domain import ledger
from ledger.errors import AlreadyInitialized
from ledger.record.authorization import parse_identity
from ledger.record.invocation import invocation
from ledger.record.record import DEFAULT_INITIAL_PRICE, DEFAULT_INITIAL_STOCK, InventoryRecord
from ledger.record.store import record_exists, save_record


@ledger.command(part_of="InventoryRecord")
class InitializeRecord:
    """Create the record at an address. The caller becomes its permanent owner."""

    address = Identifier(required=True)
    caller = Identifier()
    initial_stock = Integer()  # Defaults to 100 when omitted
    initial_price = Integer()  # Defaults to 1,000,000 when omitted


@ledger.command_handler(part_of=InventoryRecord)
class InitializeRecordHandler:
    @handle(InitializeRecord)
    def initialize_record(self, command):
        with invocation("Initialize", command.address, command.caller):
            owner = parse_identity(command.caller)
            if record_exists(command.address):
                raise AlreadyInitialized({"address": [f"Record at {command.address} is already initialized"]})

            record = InventoryRecord.initialize(
                address=command.address,
                owner=owner,
                initial_stock=DEFAULT_INITIAL_STOCK if command.initial_stock is None else command.initial_stock,
                initial_price=DEFAULT_INITIAL_PRICE if command.initial_price is None else command.initial_price,
            )
            save_record(record)
            return record.to_summary()
