import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def backoffice_bed():
    from backoffice.domain import backoffice

    bed = DomainFixture(backoffice)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(backoffice_bed):
    with backoffice_bed.domain_context():
        yield
