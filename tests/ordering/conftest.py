import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


# ---------------------------------------------------------------------------
# Catalogue and customer data shared by application and integration tests
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer_id():
    from ordering.customer.registration import RegisterCustomer

    return current_domain.process(
        RegisterCustomer(name="Asha Rao", email="asha@example.com", phone="+91 98765-43210"),
        asynchronous=False,
    )


@pytest.fixture()
def apple_id():
    """Apple lists at 60 and sells at 50."""
    from ordering.catalogue.management import AddProduct

    return current_domain.process(
        AddProduct(name="Apple", price=60.0, discount_price=50.0),
        asynchronous=False,
    )


@pytest.fixture()
def bread_id():
    from ordering.catalogue.management import AddProduct

    return current_domain.process(AddProduct(name="Bread", price=30.0), asynchronous=False)
