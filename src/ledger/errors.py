"""Failure kinds for ledger invocations.

Every failure is terminal for the invocation that raised it: the unit of work
discards pending writes and the caller receives the specific kind. Messages
follow Protean's ``ValidationError`` shape (field name -> list of strings).
"""


class LedgerError(Exception):
    """Base class for all typed ledger failures."""

    code = "LedgerError"
    retryable = False

    def __init__(self, messages: dict[str, list[str]]) -> None:
        super().__init__(messages)
        self.messages = messages

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "messages": self.messages,
            "retryable": self.retryable,
        }


class AlreadyInitialized(LedgerError):
    code = "AlreadyInitialized"


class Unauthorized(LedgerError):
    code = "Unauthorized"


class InvalidAmount(LedgerError):
    code = "InvalidAmount"


class InvalidPrice(LedgerError):
    code = "InvalidPrice"


class InsufficientStock(LedgerError):
    code = "InsufficientStock"


class Overflow(LedgerError):
    code = "Overflow"


class TransferFailed(LedgerError):
    """Settlement did not complete. The caller may resubmit a fresh invocation."""

    code = "TransferFailed"
    retryable = True


class RecordNotFound(LedgerError):
    code = "NotFound"


class InvalidInstruction(LedgerError):
    code = "InvalidInstruction"
