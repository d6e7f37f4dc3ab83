"""Configurable in-memory transfer service for development and testing.

Keeps funding accounts keyed by identity, checks that the authority owns the
debited account and that the balance covers the amount. It can also be told
to decline every transfer or to behave as if it were offline, which makes
settlement failures easy to inject.
"""

from uuid import uuid4

from ledger.settlement.port import TransferResult, TransferService, TransferServiceUnavailable


class FakeTransferService(TransferService):
    """In-memory transfer service."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Transfer declined"
        self.available: bool = True
        self.accounts: dict[str, dict] = {}
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool,
        failure_reason: str = "Transfer declined",
        available: bool = True,
    ) -> None:
        """Configure service behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.available = available

    def open_account(self, account: str, owner: str | None = None, balance: int = 0) -> None:
        """Create an account, or top up an existing one by ``balance``."""
        existing = self.accounts.get(account)
        if existing is None:
            self.accounts[account] = {"owner": owner or account, "balance": balance}
        else:
            existing["balance"] += balance

    def balance_of(self, account: str) -> int:
        return self.accounts.get(account, {}).get("balance", 0)

    def transfer(
        self,
        source: str,
        destination: str,
        amount: int,
        authority: str,
    ) -> TransferResult:
        self.calls.append(
            {
                "method": "transfer",
                "source": source,
                "destination": destination,
                "amount": amount,
                "authority": authority,
            }
        )

        if not self.available:
            raise TransferServiceUnavailable("Transfer service is offline")
        if not self.should_succeed:
            return TransferResult(success=False, failure_reason=self.failure_reason)

        source_account = self.accounts.get(source)
        if source_account is None:
            return TransferResult(success=False, failure_reason=f"Unknown source account {source}")
        if source_account["owner"] != authority:
            return TransferResult(success=False, failure_reason="Debit not authorized by the account owner")
        if source_account["balance"] < amount:
            return TransferResult(success=False, failure_reason="Insufficient funds")

        # Destination accounts are created on first credit
        self.open_account(destination)
        source_account["balance"] -= amount
        self.accounts[destination]["balance"] += amount

        return TransferResult(success=True, transfer_id=f"fake_xfer_{uuid4().hex[:12]}")
