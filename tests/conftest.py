"""Pytest configuration and shared fixtures for all tests."""

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from adyen_client import TESTING, Adyen
from tests.helpers import (
    TEST_HMAC_KEY,
    TEST_MERCHANT_ACCOUNT,
    TEST_PASSWORD,
    TEST_USERNAME,
    RecordingTransport,
)


@pytest.fixture
def logger() -> MagicMock:
    """Logger double that keeps test output quiet and records events."""
    return MagicMock()


@pytest.fixture
def client(logger: MagicMock) -> Adyen:
    """Client for the test platform without an HMAC key."""
    return Adyen(
        TESTING,
        TEST_USERNAME,
        TEST_PASSWORD,
        merchant_account=TEST_MERCHANT_ACCOUNT,
        logger=logger,
    )


@pytest.fixture
def hpp_client(logger: MagicMock) -> Adyen:
    """Client for the test platform with an HPP skin HMAC key."""
    return Adyen(
        TESTING,
        TEST_USERNAME,
        TEST_PASSWORD,
        TEST_HMAC_KEY,
        merchant_account=TEST_MERCHANT_ACCOUNT,
        logger=logger,
    )


@pytest.fixture
def make_wire_client(logger: MagicMock) -> Callable[..., tuple[Adyen, RecordingTransport]]:
    """Factory for clients whose HTTP traffic goes to a RecordingTransport."""

    def factory(response: httpx.Response | None = None, hmac_key: str | None = None):
        recorder = RecordingTransport(response)
        http_client = httpx.Client(transport=httpx.MockTransport(recorder))
        adyen = Adyen(
            TESTING,
            TEST_USERNAME,
            TEST_PASSWORD,
            hmac_key,
            merchant_account=TEST_MERCHANT_ACCOUNT,
            logger=logger,
            http_client=http_client,
        )
        return adyen, recorder

    return factory
