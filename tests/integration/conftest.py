"""Integration test configuration.

These tests call the Adyen test platform and need a web service user:

    ADYEN_USERNAME=ws@Company.YourCompany
    ADYEN_PASSWORD=...
    ADYEN_MERCHANT_ACCOUNT=YourCompanyCOM
    ADYEN_HMAC=...            # optional, enables HPP tests
    ADYEN_SKIN_CODE=...       # optional, enables HPP tests

Run with:
    pytest tests/integration -v -m integration
"""

import os
import random
import string

import pytest

from adyen_client import Adyen, AdyenSettings


def pytest_collection_modifyitems(config, items):
    """Automatically mark all tests in this directory as integration tests."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def sandbox_settings() -> AdyenSettings:
    settings = AdyenSettings(environment="test")
    if not settings.username or not settings.password or not settings.merchant_account:
        pytest.skip("ADYEN_USERNAME, ADYEN_PASSWORD and ADYEN_MERCHANT_ACCOUNT are required")
    return settings


@pytest.fixture
def sandbox_client(sandbox_settings: AdyenSettings):
    with Adyen.from_settings(sandbox_settings) as client:
        yield client


@pytest.fixture
def skin_code() -> str:
    code = os.getenv("ADYEN_SKIN_CODE")
    if not code:
        pytest.skip("ADYEN_SKIN_CODE is required for HPP tests")
    return code


@pytest.fixture
def reference() -> str:
    """Random merchant reference so repeated runs do not collide."""
    return "test-" + "".join(random.choices(string.ascii_uppercase, k=12))
