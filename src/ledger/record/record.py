"""InventoryRecord aggregate (CQRS): stock and unit price for one seller.

One record lives at each address. The owner is fixed when the record is
initialized and is the only identity allowed to add stock or change the price.
Anyone may buy; the sale is settled by the caller of ``compute_sale`` before
the record is persisted.

Arithmetic model:
    stock: unsigned 64-bit count of units left
    price: unsigned 64-bit price per unit, smallest currency unit, never zero
    total_due: quantity * price, must also fit in 64 bits

All mutations check their inputs first and raise a typed ``LedgerError``
before touching any field, so a rejected operation leaves the aggregate
exactly as it was.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from ledger.domain import ledger
from ledger.errors import InsufficientStock, InvalidAmount, InvalidPrice, Overflow
from ledger.record.events import PriceUpdated, RecordInitialized, StockAdded, UnitsSold
from ledger.record.layout import pack_record

U64_MAX = 2**64 - 1

DEFAULT_INITIAL_STOCK = 100
DEFAULT_INITIAL_PRICE = 1_000_000


def is_u64(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def _check_price(price, field):
    if not is_u64(price) or price == 0:
        raise InvalidPrice({field: [f"Price must be an integer between 1 and {U64_MAX}"]})


def _check_positive_amount(amount, field):
    if not is_u64(amount) or amount == 0:
        raise InvalidAmount({field: [f"{field.capitalize()} must be an integer between 1 and {U64_MAX}"]})


@ledger.aggregate
class InventoryRecord:
    """Authoritative stock and price entry for a single product of one seller."""

    address = Identifier(identifier=True)
    owner = Identifier(required=True)
    stock = Integer(default=0)
    price = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def stock_fits_in_unsigned_64_bits(self):
        if self.stock is None or not 0 <= self.stock <= U64_MAX:
            raise ValidationError({"stock": ["Stock must be between 0 and 2**64 - 1"]})

    @invariant.post
    def price_is_positive(self):
        if self.price is None or not 0 < self.price <= U64_MAX:
            raise ValidationError({"price": ["Price must be between 1 and 2**64 - 1"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def initialize(
        cls,
        address,
        owner,
        initial_stock=DEFAULT_INITIAL_STOCK,
        initial_price=DEFAULT_INITIAL_PRICE,
    ):
        """Create the record at ``address`` owned by ``owner``.

        The caller is responsible for making sure the address is still free;
        see ``ledger.record.store.record_exists``.
        """
        if not is_u64(initial_stock):
            raise InvalidAmount({"initial_stock": [f"Initial stock must be an integer between 0 and {U64_MAX}"]})
        _check_price(initial_price, "initial_price")

        now = datetime.now(UTC)
        record = cls(
            address=address,
            owner=owner,
            stock=initial_stock,
            price=initial_price,
            created_at=now,
            updated_at=now,
        )
        record.raise_(
            RecordInitialized(
                address=str(address),
                owner=owner,
                initial_stock=initial_stock,
                initial_price=initial_price,
                initialized_at=now,
            )
        )
        return record

    # -------------------------------------------------------------------
    # Owner operations
    # -------------------------------------------------------------------
    def add_stock(self, amount):
        """Add ``amount`` units. Checked addition: never wraps past 64 bits."""
        _check_positive_amount(amount, "amount")

        previous_stock = self.stock
        new_stock = previous_stock + amount
        if new_stock > U64_MAX:
            raise Overflow({"amount": [f"Adding {amount} units to {previous_stock} exceeds the stock limit"]})

        self.stock = new_stock
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockAdded(
                address=str(self.address),
                amount=amount,
                previous_stock=previous_stock,
                new_stock=new_stock,
                added_at=self.updated_at,
            )
        )

    def update_price(self, new_price):
        """Replace the unit price. Zero is rejected; giveaways are not supported."""
        _check_price(new_price, "new_price")

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)
        self.raise_(
            PriceUpdated(
                address=str(self.address),
                previous_price=previous_price,
                new_price=new_price,
                updated_at=self.updated_at,
            )
        )

    # -------------------------------------------------------------------
    # Sale
    # -------------------------------------------------------------------
    def compute_sale(self, quantity, buyer):
        """Take ``quantity`` units off the record and return the amount due.

        Moves no funds. The new stock figure is only tentative until the
        record is saved, which must happen after settlement succeeds.
        """
        _check_positive_amount(quantity, "quantity")

        previous_stock = self.stock
        if quantity > previous_stock:
            raise InsufficientStock(
                {"quantity": [f"Insufficient stock: {previous_stock} available, {quantity} requested"]}
            )

        unit_price = self.price
        total_due = quantity * unit_price
        if total_due > U64_MAX:
            raise Overflow({"quantity": [f"Total due for {quantity} units at {unit_price} exceeds the 64-bit limit"]})

        new_stock = previous_stock - quantity
        self.stock = new_stock
        self.updated_at = datetime.now(UTC)
        self.raise_(
            UnitsSold(
                address=str(self.address),
                buyer=buyer,
                quantity=quantity,
                unit_price=unit_price,
                total_due=total_due,
                previous_stock=previous_stock,
                new_stock=new_stock,
                sold_at=self.updated_at,
            )
        )
        return total_due

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------
    def snapshot(self) -> bytes:
        """Fixed-width byte image of the persisted fields."""
        return pack_record(self)

    def to_summary(self) -> dict:
        return {
            "address": str(self.address),
            "owner": str(self.owner),
            "stock": self.stock,
            "price": self.price,
        }
