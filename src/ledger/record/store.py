"""Record store access: one InventoryRecord per address.

SQL providers keep counters in signed 64-bit INTEGER columns, so a record held
there cannot exceed ``2**63 - 1``. ``save_record`` checks the record against
the range of the configured provider and raises a typed failure before the
unit of work ever tries to write it.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.errors import Overflow, RecordNotFound
from ledger.record.record import U64_MAX, InventoryRecord
from ledger.utils.db import SQL_PROVIDERS

SQL_INTEGER_MAX = 2**63 - 1


def load_record(address) -> InventoryRecord:
    """Fetch the record at ``address`` or fail with ``NotFound``."""
    try:
        return current_domain.repository_for(InventoryRecord).get(address)
    except ObjectNotFoundError as exc:
        raise RecordNotFound({"address": [f"No record at address {address}"]}) from exc


def record_exists(address) -> bool:
    try:
        current_domain.repository_for(InventoryRecord).get(address)
    except ObjectNotFoundError:
        return False
    return True


def storage_limit() -> int:
    """Largest stock or price the configured record store can hold."""
    provider_name = InventoryRecord.meta_.provider
    for name, provider in current_domain.providers.items():
        if name == provider_name and provider.conn_info["provider"] in SQL_PROVIDERS:
            return SQL_INTEGER_MAX
    return U64_MAX


def ensure_storable(record: InventoryRecord) -> None:
    """Raise ``Overflow`` when the record does not fit in the configured store."""
    limit = storage_limit()
    for field in ("stock", "price"):
        value = getattr(record, field)
        if value > limit:
            raise Overflow({field: [f"{field.capitalize()} {value} exceeds the record store limit of {limit}"]})


def save_record(record: InventoryRecord) -> None:
    ensure_storable(record)
    current_domain.repository_for(InventoryRecord).add(record)
