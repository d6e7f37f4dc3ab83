"""HTTP mapping for ledger failure kinds."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledger.errors import (
    AlreadyInitialized,
    InsufficientStock,
    InvalidAmount,
    InvalidInstruction,
    InvalidPrice,
    LedgerError,
    Overflow,
    RecordNotFound,
    TransferFailed,
    Unauthorized,
)

STATUS_CODES = {
    AlreadyInitialized: 409,
    Unauthorized: 403,
    InvalidAmount: 400,
    InvalidPrice: 400,
    InsufficientStock: 409,
    Overflow: 400,
    TransferFailed: 402,
    RecordNotFound: 404,
    InvalidInstruction: 400,
}


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=STATUS_CODES.get(type(exc), 400), content=exc.to_dict())


def register_ledger_exception_handlers(app: FastAPI) -> None:
    """Translate every LedgerError raised by a route into its typed JSON reply."""
    app.add_exception_handler(LedgerError, ledger_error_handler)
