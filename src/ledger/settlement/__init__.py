"""Transfer service factory.

Provides get_transfer_service() / set_transfer_service() to swap implementations:
- FakeTransferService for development and testing (default)
- RemoteTransferService for a real HTTP transfer service

The default is chosen by the TRANSFER_SERVICE environment variable
(``fake`` or ``remote``). The remote adapter reads TRANSFER_SERVICE_URL and
TRANSFER_SERVICE_TIMEOUT (seconds).
"""

import os

from ledger.settlement.port import TransferService

_current_service: TransferService | None = None


def _build_default_service() -> TransferService:
    adapter = os.environ.get("TRANSFER_SERVICE", "fake")
    if adapter == "fake":
        from ledger.settlement.fake_adapter import FakeTransferService

        return FakeTransferService()
    if adapter == "remote":
        from ledger.settlement.remote_adapter import RemoteTransferService

        return RemoteTransferService(
            base_url=os.environ["TRANSFER_SERVICE_URL"],
            timeout=float(os.environ.get("TRANSFER_SERVICE_TIMEOUT", "10")),
        )
    raise ValueError(f"Unknown transfer service adapter: {adapter}")


def get_transfer_service() -> TransferService:
    """Return the current transfer service, building the default on first use."""
    global _current_service
    if _current_service is None:
        _current_service = _build_default_service()
    return _current_service


def set_transfer_service(service: TransferService) -> None:
    """Override the active transfer service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_transfer_service() -> None:
    """Reset to the default transfer service."""
    global _current_service
    _current_service = None
