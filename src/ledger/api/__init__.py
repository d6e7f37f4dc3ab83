from ledger.api.errors import register_ledger_exception_handlers
from ledger.api.routes import record_router, settlement_router

__all__ = ["record_router", "settlement_router", "register_ledger_exception_handlers"]
