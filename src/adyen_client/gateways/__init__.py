"""Per-service operation groups exposed by the Adyen client."""

from adyen_client.gateways.base import Gateway
from adyen_client.gateways.modification import ModificationGateway
from adyen_client.gateways.payment import PaymentGateway
from adyen_client.gateways.recurring import RecurringGateway

__all__ = [
    "Gateway",
    "ModificationGateway",
    "PaymentGateway",
    "RecurringGateway",
]
