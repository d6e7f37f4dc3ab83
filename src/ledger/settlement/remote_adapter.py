"""HTTP transfer service adapter.

Posts each transfer as JSON to the service endpoint and reads back
``{"success": bool, "transfer_id": str, "failure_reason": str}``. Connection
errors, timeouts and 5xx answers mean the outcome is unknown to us and are
raised as ``TransferServiceUnavailable``; the service guarantees a transfer
that errored was not applied.
"""

import requests

from ledger.settlement.port import TransferResult, TransferService, TransferServiceUnavailable


class RemoteTransferService(TransferService):
    """Transfer service reached over HTTP."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def transfer(
        self,
        source: str,
        destination: str,
        amount: int,
        authority: str,
    ) -> TransferResult:
        payload = {
            "source": source,
            "destination": destination,
            # Sent as a string: u64 amounts do not survive JSON number parsing everywhere
            "amount": str(amount),
            "authority": authority,
        }
        try:
            response = self.session.post(f"{self.base_url}/transfers", json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransferServiceUnavailable(f"Transfer service request failed: {exc}") from exc

        if response.status_code >= 500:
            raise TransferServiceUnavailable(f"Transfer service answered {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise TransferServiceUnavailable("Transfer service returned a malformed body") from exc

        if response.ok and body.get("success"):
            return TransferResult(success=True, transfer_id=body.get("transfer_id"))
        return TransferResult(
            success=False,
            failure_reason=body.get("failure_reason") or f"Transfer rejected with status {response.status_code}",
        )
