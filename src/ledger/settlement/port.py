"""Value transfer service port (abstract interface).

Defines the contract every transfer service adapter must implement. A single
``transfer`` call is atomic on the service side: it either moves the full
amount or nothing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TransferServiceUnavailable(Exception):
    """The service could not be reached or did not answer in time."""


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a transfer the service did process."""

    success: bool
    transfer_id: str | None = None
    failure_reason: str | None = None


class TransferService(ABC):
    """Abstract value transfer service interface."""

    @abstractmethod
    def transfer(
        self,
        source: str,
        destination: str,
        amount: int,
        authority: str,
    ) -> TransferResult:
        """Move ``amount`` smallest currency units from ``source`` to ``destination``.

        ``authority`` is the identity that signed for the debit; the service
        refuses the transfer if it does not control ``source``.
        """
        ...
