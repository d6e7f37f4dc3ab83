"""Fixed-width byte layout of an inventory record.

    offset  size  field
    0       8     stock        u64, little endian
    8       8     price        u64, little endian
    16      32    owner        raw identity bytes
    48      1     initialized  1 once the record exists, 0 for a free slot

A free slot is all zeros, so an unset record is never confused with a record
whose counters happen to be zero.
"""

import struct
from typing import NamedTuple

RECORD_LAYOUT = struct.Struct("<QQ32sB")
RECORD_SIZE = RECORD_LAYOUT.size

EMPTY_SLOT = bytes(RECORD_SIZE)


class RecordImage(NamedTuple):
    stock: int
    price: int
    owner: str


def pack_record(record) -> bytes:
    """Encode any object exposing ``stock``, ``price`` and ``owner``."""
    return RECORD_LAYOUT.pack(record.stock, record.price, bytes.fromhex(record.owner), 1)


def unpack_record(data: bytes) -> RecordImage | None:
    """Decode a slot. Returns None when the slot holds no record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"Record data must be {RECORD_SIZE} bytes, got {len(data)}")

    stock, price, owner, initialized = RECORD_LAYOUT.unpack(data)
    if not initialized:
        return None
    return RecordImage(stock=stock, price=price, owner=owner.hex())
