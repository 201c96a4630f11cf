import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture
def gateway():
    from storefront.persistence.gateway import PersistenceGateway

    return PersistenceGateway()


@pytest.fixture
def seeded(gateway):
    """Store loaded with the seed dataset."""
    from storefront.seeding import seed_store

    seed_store(gateway)
    return gateway
