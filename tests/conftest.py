import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Point the gateway at fake downstream services and keep log files out of
    the working tree before the application module is imported anywhere.
    """
    os.environ["REVIEW_GATEWAY_ENVIRONMENT"] = session.config.option.env
    os.environ["REVIEW_GATEWAY_DOWNSTREAM_ADAPTER"] = "fake"
    os.environ.setdefault("LOG_DIR", str(Path(session.config.rootpath) / ".pytest_logs"))


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Drop cached settings and adapter singletons after every test."""
    yield

    from identity.auth import reset_identity_service
    from reviews.company import reset_company_service
    from reviews.product import reset_product_service
    from shared.config import get_settings

    reset_identity_service()
    reset_product_service()
    reset_company_service()
    get_settings.cache_clear()


@pytest.fixture()
def identity_service():
    from identity.auth import set_identity_service
    from identity.auth.fake_adapter import FakeIdentityService

    service = FakeIdentityService()
    set_identity_service(service)
    return service


@pytest.fixture()
def product_service():
    from reviews.product import set_product_service
    from reviews.product.fake_adapter import FakeProductReviewService

    service = FakeProductReviewService()
    set_product_service(service)
    return service


@pytest.fixture()
def company_service():
    from reviews.company import set_company_service
    from reviews.company.fake_adapter import FakeCompanyRatingService

    service = FakeCompanyRatingService()
    set_company_service(service)
    return service


@pytest.fixture()
def client():
    from app import app
    from fastapi.testclient import TestClient

    return TestClient(app)
