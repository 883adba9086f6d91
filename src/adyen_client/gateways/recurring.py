"""Recurring gateway: stored payment details of a shopper."""

from adyen_client.config import RECURRING_SERVICE
from adyen_client.gateways.base import Gateway
from adyen_client.models.recurring import (
    RecurringDetailsRequest,
    RecurringDetailsResult,
    RecurringDisableRequest,
    RecurringDisableResponse,
)

LIST_RECURRING_DETAILS_TYPE = "listRecurringDetails"
DISABLE_RECURRING_TYPE = "disable"


class RecurringGateway(Gateway):
    def list_recurring_details(self, request: RecurringDetailsRequest) -> RecurringDetailsResult:
        """List the payment details stored for ``request.shopper_reference``."""
        return self._call(
            RECURRING_SERVICE,
            LIST_RECURRING_DETAILS_TYPE,
            request,
            RecurringDetailsResult,
        )

    def disable_recurring(self, request: RecurringDisableRequest) -> RecurringDisableResponse:
        """Disable one stored detail, or all details of the shopper."""
        return self._call(
            RECURRING_SERVICE,
            DISABLE_RECURRING_TYPE,
            request,
            RecurringDisableResponse,
        )
