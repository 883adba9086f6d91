"""Client library for the Adyen payment API."""

from adyen_client.client import Adyen
from adyen_client.config import (
    API_VERSION,
    DEFAULT_CURRENCY,
    DEFAULT_TIMEOUT_SECONDS,
    PAYMENT_SERVICE,
    RECURRING_SERVICE,
    AdyenSettings,
)
from adyen_client.credentials import Credentials
from adyen_client.environment import (
    PRODUCTION,
    TESTING,
    Environment,
    production_environment,
)
from adyen_client.response import Response

__all__ = [
    "Adyen",
    "AdyenSettings",
    "API_VERSION",
    "DEFAULT_CURRENCY",
    "DEFAULT_TIMEOUT_SECONDS",
    "PAYMENT_SERVICE",
    "RECURRING_SERVICE",
    "Credentials",
    "Environment",
    "PRODUCTION",
    "TESTING",
    "production_environment",
    "Response",
]
