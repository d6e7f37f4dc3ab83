"""Settlement bridge: pays the record owner for a sale.

Every way a settlement can fail (declined, insufficient buyer funds, missing
buyer authorization, service offline) reaches the caller as ``TransferFailed``.
Nothing is retried here; the caller may resubmit the whole invocation.
"""

import structlog

from ledger.errors import TransferFailed
from ledger.settlement import get_transfer_service
from ledger.settlement.port import TransferResult, TransferServiceUnavailable

logger = structlog.get_logger(__name__)


def settle(buyer: str, owner: str, total_due: int) -> TransferResult:
    """Move ``total_due`` from the buyer's account to the owner's account."""
    service = get_transfer_service()
    try:
        result = service.transfer(
            source=buyer,
            destination=owner,
            amount=total_due,
            authority=buyer,
        )
    except TransferServiceUnavailable as exc:
        logger.warning("Settlement service unavailable", buyer=buyer, owner=owner, total_due=total_due, error=str(exc))
        raise TransferFailed({"settlement": [str(exc)]}) from exc

    if not result.success:
        logger.warning(
            "Settlement declined",
            buyer=buyer,
            owner=owner,
            total_due=total_due,
            reason=result.failure_reason,
        )
        raise TransferFailed({"settlement": [result.failure_reason or "Transfer failed"]})

    logger.info(
        "Settlement completed",
        buyer=buyer,
        owner=owner,
        total_due=total_due,
        transfer_id=result.transfer_id,
    )
    return result
