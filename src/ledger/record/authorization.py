"""Owner authorization guard.

The hosting environment proves that a caller controls the identity it
presents; the guard only compares identity values. Identities are 32-byte
public keys written as 64 hex characters.
"""

import re

from ledger.errors import Unauthorized

IDENTITY_BYTES = 32

_IDENTITY_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def parse_identity(value, field="caller") -> str:
    """Return the canonical (lower-case hex) form of an identity.

    A missing or malformed identity cannot have been proven by the hosting
    environment, so it is rejected as ``Unauthorized``.
    """
    identity = str(value or "").strip().lower()
    if not _IDENTITY_PATTERN.match(identity):
        raise Unauthorized({field: [f"Not a valid {IDENTITY_BYTES}-byte identity"]})
    return identity


def authorize(record, caller) -> None:
    """Allow a mutation only when the caller is the record's owner."""
    if parse_identity(caller) != record.owner:
        raise Unauthorized({"caller": ["Caller is not the owner of this record"]})
