"""Pydantic request/response schemas for the Ledger API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands. Numeric fields accept any JSON number; whole-number
and range checks happen in the routes and the domain, so callers receive the
typed failure kind rather than a generic 422.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Record Request Schemas
# ---------------------------------------------------------------------------
class InitializeRecordRequest(BaseModel):
    initial_stock: int | float | None = None
    initial_price: int | float | None = None


class AddStockRequest(BaseModel):
    amount: int | float


class UpdatePriceRequest(BaseModel):
    new_price: int | float


class SellRequest(BaseModel):
    quantity: int | float


class InstructionRequest(BaseModel):
    data: str = Field(description="Hex-encoded instruction bytes")


# ---------------------------------------------------------------------------
# Settlement Request Schemas
# ---------------------------------------------------------------------------
class ConfigureTransferServiceRequest(BaseModel):
    should_succeed: bool = True
    failure_reason: str = "Transfer declined"
    available: bool = True


class OpenAccountRequest(BaseModel):
    account: str
    owner: str | None = None
    balance: int = Field(ge=0, default=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class RecordResponse(BaseModel):
    address: str
    owner: str
    stock: int
    price: int


class RecordDetailResponse(RecordResponse):
    data: str  # Hex of the fixed-width record layout


class SaleResponse(RecordResponse):
    total_due: int


class InstructionResponse(RecordResponse):
    total_due: int | None = None


class TransferServiceConfigResponse(BaseModel):
    service: str
    should_succeed: bool
    failure_reason: str
    available: bool


class AccountResponse(BaseModel):
    account: str
    owner: str
    balance: int
