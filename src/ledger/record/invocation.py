"""Invocation lifecycle logging.

An invocation is one end-to-end run of a command handler. The handler either
completes and hands its writes to the surrounding unit of work, or raises and
every pending write is discarded. The commit itself happens after the handler
returns, so "completed" means the handler finished, not that the writes are
durable.
"""

from contextlib import contextmanager

import structlog

from ledger.errors import LedgerError

logger = structlog.get_logger(__name__)


@contextmanager
def invocation(operation, address, caller):
    log = logger.bind(operation=operation, address=str(address), caller=caller)
    log.info("Invocation received")
    try:
        yield log
    except LedgerError as exc:
        log.warning("Invocation aborted", error=exc.code, messages=exc.messages)
        raise
    except Exception as exc:
        log.error("Invocation aborted", error=type(exc).__name__, detail=str(exc))
        raise
    log.info("Invocation completed")
