"""FastAPI routes for the Ledger domain: inventory records and settlement.

The hosting gateway verifies signatures and forwards the proven identity in
the ``X-Caller-Identity`` header. For sales that identity is the buyer.
"""

import os

from fastapi import APIRouter, Header, HTTPException
from protean.utils.globals import current_domain

from ledger.api.schemas import (
    AccountResponse,
    AddStockRequest,
    ConfigureTransferServiceRequest,
    InitializeRecordRequest,
    InstructionRequest,
    InstructionResponse,
    OpenAccountRequest,
    RecordDetailResponse,
    RecordResponse,
    SaleResponse,
    SellRequest,
    TransferServiceConfigResponse,
    UpdatePriceRequest,
)
from ledger.errors import InvalidAmount, InvalidInstruction, InvalidPrice
from ledger.record.initialization import InitializeRecord
from ledger.record.instruction import dispatch
from ledger.record.pricing import UpdatePrice
from ledger.record.restocking import AddStock
from ledger.record.sale import Sell
from ledger.record.store import load_record
from ledger.settlement import get_transfer_service
from ledger.settlement.fake_adapter import FakeTransferService

# ---------------------------------------------------------------------------
# Record Router
# ---------------------------------------------------------------------------
record_router = APIRouter(prefix="/records", tags=["records"])


def _whole_number(value, field, error_class):
    """Reject JSON numbers with a fractional form before they reach a command."""
    if value is not None and not isinstance(value, int):
        raise error_class({field: [f"{field.capitalize()} must be a whole number, got {value}"]})
    return value


@record_router.post("/{address}", status_code=201, response_model=RecordResponse)
async def initialize_record(
    address: str,
    body: InitializeRecordRequest,
    x_caller_identity: str = Header(default=""),
) -> RecordResponse:
    command = InitializeRecord(
        address=address,
        caller=x_caller_identity,
        initial_stock=_whole_number(body.initial_stock, "initial_stock", InvalidAmount),
        initial_price=_whole_number(body.initial_price, "initial_price", InvalidPrice),
    )
    result = current_domain.process(command, asynchronous=False)
    return RecordResponse(**result)


@record_router.get("/{address}", response_model=RecordDetailResponse)
async def get_record(address: str) -> RecordDetailResponse:
    record = load_record(address)
    return RecordDetailResponse(**record.to_summary(), data=record.snapshot().hex())


@record_router.put("/{address}/stock", response_model=RecordResponse)
async def add_stock(
    address: str,
    body: AddStockRequest,
    x_caller_identity: str = Header(default=""),
) -> RecordResponse:
    command = AddStock(
        address=address,
        caller=x_caller_identity,
        amount=_whole_number(body.amount, "amount", InvalidAmount),
    )
    result = current_domain.process(command, asynchronous=False)
    return RecordResponse(**result)


@record_router.put("/{address}/price", response_model=RecordResponse)
async def update_price(
    address: str,
    body: UpdatePriceRequest,
    x_caller_identity: str = Header(default=""),
) -> RecordResponse:
    command = UpdatePrice(
        address=address,
        caller=x_caller_identity,
        new_price=_whole_number(body.new_price, "new_price", InvalidPrice),
    )
    result = current_domain.process(command, asynchronous=False)
    return RecordResponse(**result)


@record_router.post("/{address}/sales", status_code=201, response_model=SaleResponse)
async def sell(
    address: str,
    body: SellRequest,
    x_caller_identity: str = Header(default=""),
) -> SaleResponse:
    command = Sell(
        address=address,
        buyer=x_caller_identity,
        quantity=_whole_number(body.quantity, "quantity", InvalidAmount),
    )
    result = current_domain.process(command, asynchronous=False)
    return SaleResponse(**result)


@record_router.post("/{address}/instructions", response_model=InstructionResponse)
async def process_instruction(
    address: str,
    body: InstructionRequest,
    x_caller_identity: str = Header(default=""),
) -> InstructionResponse:
    """Process a raw binary instruction (hex encoded)."""
    try:
        data = bytes.fromhex(body.data)
    except ValueError as exc:
        raise InvalidInstruction({"data": ["Instruction data is not valid hex"]}) from exc

    result = dispatch(address, x_caller_identity, data)
    return InstructionResponse(**result)


# ---------------------------------------------------------------------------
# Settlement Router
# ---------------------------------------------------------------------------
settlement_router = APIRouter(prefix="/settlement", tags=["settlement"])


def _fake_service_or_reject() -> FakeTransferService:
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Transfer service configuration not available in production")

    service = get_transfer_service()
    if not isinstance(service, FakeTransferService):
        raise HTTPException(status_code=400, detail="Configuration only available for FakeTransferService")
    return service


@settlement_router.post("/configure", response_model=TransferServiceConfigResponse)
async def configure_transfer_service(body: ConfigureTransferServiceRequest) -> TransferServiceConfigResponse:
    """Configure the FakeTransferService behavior (non-production only)."""
    service = _fake_service_or_reject()
    service.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
        available=body.available,
    )
    return TransferServiceConfigResponse(
        service=type(service).__name__,
        should_succeed=service.should_succeed,
        failure_reason=service.failure_reason,
        available=service.available,
    )


@settlement_router.post("/accounts", status_code=201, response_model=AccountResponse)
async def open_account(body: OpenAccountRequest) -> AccountResponse:
    """Open or fund a FakeTransferService account (non-production only)."""
    service = _fake_service_or_reject()
    service.open_account(body.account, owner=body.owner, balance=body.balance)
    account = service.accounts[body.account]
    return AccountResponse(account=body.account, owner=account["owner"], balance=account["balance"])
