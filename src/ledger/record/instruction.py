"""Binary instruction decoding and dispatch.

Instruction data is one tag byte followed by little-endian u64 arguments:

    tag  operation     arguments
    0    Initialize    none (stock 100, price 1,000,000) or stock, price
    1    AddStock      amount
    2    UpdatePrice   new_price
    3    Sell          quantity

The caller identity and the record address come from the invocation context,
never from the instruction bytes. For Sell the caller is the buyer.
"""

import struct

from protean.utils.globals import current_domain

from ledger.errors import InvalidInstruction
from ledger.record.initialization import InitializeRecord
from ledger.record.pricing import UpdatePrice
from ledger.record.restocking import AddStock
from ledger.record.sale import Sell

TAG_INITIALIZE = 0
TAG_ADD_STOCK = 1
TAG_UPDATE_PRICE = 2
TAG_SELL = 3

_U64 = struct.Struct("<Q")


def _u64_arguments(payload: bytes, count: int, operation: str) -> list[int]:
    if len(payload) != count * _U64.size:
        raise InvalidInstruction(
            {"data": [f"{operation} expects {count * _U64.size} argument bytes, got {len(payload)}"]}
        )
    return [value for (value,) in _U64.iter_unpack(payload)]


def decode_instruction(address, caller, data: bytes):
    """Turn raw instruction bytes into the matching command."""
    if not data:
        raise InvalidInstruction({"data": ["Instruction data is empty"]})

    tag, payload = data[0], data[1:]

    if tag == TAG_INITIALIZE:
        if not payload:
            return InitializeRecord(address=address, caller=caller)
        initial_stock, initial_price = _u64_arguments(payload, 2, "Initialize")
        return InitializeRecord(
            address=address,
            caller=caller,
            initial_stock=initial_stock,
            initial_price=initial_price,
        )
    if tag == TAG_ADD_STOCK:
        (amount,) = _u64_arguments(payload, 1, "AddStock")
        return AddStock(address=address, caller=caller, amount=amount)
    if tag == TAG_UPDATE_PRICE:
        (new_price,) = _u64_arguments(payload, 1, "UpdatePrice")
        return UpdatePrice(address=address, caller=caller, new_price=new_price)
    if tag == TAG_SELL:
        (quantity,) = _u64_arguments(payload, 1, "Sell")
        return Sell(address=address, buyer=caller, quantity=quantity)

    raise InvalidInstruction({"data": [f"Unknown instruction tag {tag}"]})


def encode_instruction(tag: int, *arguments: int) -> bytes:
    """Build instruction bytes; the inverse of ``decode_instruction``."""
    return bytes([tag]) + b"".join(_U64.pack(argument) for argument in arguments)


def dispatch(address, caller, data: bytes):
    """Decode and process one instruction, returning the handler's result."""
    command = decode_instruction(address, caller, data)
    return current_domain.process(command, asynchronous=False)
