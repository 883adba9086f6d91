"""Shared plumbing for the per-service gateways."""

from typing import TYPE_CHECKING, TypeVar

from adyen_client.models.common import AdyenModel

if TYPE_CHECKING:
    from adyen_client.client import Adyen

ModelT = TypeVar("ModelT", bound=AdyenModel)


class Gateway:
    """Groups the operations of one Adyen service around a configured client."""

    def __init__(self, client: "Adyen") -> None:
        self.client = client

    def _call(
        self,
        service: str,
        request_type: str,
        entity: AdyenModel,
        response_model: type[ModelT],
    ) -> ModelT:
        """Execute a backend request and decode the reply into ``response_model``."""
        return self.client.execute(service, request_type, entity).parse(response_model)
