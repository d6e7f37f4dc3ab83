"""Ledger bounded context: single-product inventory record and sale settlement.

Tracks remaining stock and unit price for one seller per record address,
guards owner-only mutations, and settles sales through an external value
transfer service. Records are standard CQRS aggregates (not event sourced).
"""

import structlog
from protean.domain import Domain

ledger = Domain(name="ledger")

logger = structlog.get_logger(__name__)
