import pytest
from ledger.settlement import reset_transfer_service, set_transfer_service
from ledger.settlement.fake_adapter import FakeTransferService
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ledger_bed():
    from ledger.domain import ledger

    bed = DomainFixture(ledger)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session", autouse=True)
def ledger_schema(ledger_bed):
    """Create the record tables when the record store is SQL backed."""
    from ledger.domain import ledger
    from ledger.utils.db import drop_db, setup_db

    setup_db(ledger)
    yield
    drop_db(ledger)


@pytest.fixture(autouse=True)
def _ctx(ledger_bed):
    with ledger_bed.domain_context():
        yield

        # Clear the record store and event store between tests
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def transfer_service():
    """A fresh FakeTransferService installed for every test."""
    service = FakeTransferService()
    set_transfer_service(service)
    yield service
    reset_transfer_service()
