"""Modification gateway: capture, cancel and refund existing payments."""

from adyen_client.config import PAYMENT_SERVICE
from adyen_client.gateways.base import Gateway
from adyen_client.models.modification import (
    Cancel,
    CancelOrRefund,
    Capture,
    ModificationResponse,
    Refund,
)

CAPTURE_TYPE = "capture"
CANCEL_TYPE = "cancel"
REFUND_TYPE = "refund"
CANCEL_OR_REFUND_TYPE = "cancelOrRefund"


class ModificationGateway(Gateway):
    """
    Modifications of an authorised payment.

    Every call returns as soon as Adyen has queued the modification; the
    ``response`` field acknowledges receipt (e.g. ``[capture-received]``),
    not the final outcome.
    """

    def capture(self, request: Capture) -> ModificationResponse:
        """Capture all or part of an authorised amount."""
        return self._modify(CAPTURE_TYPE, request)

    def cancel(self, request: Cancel) -> ModificationResponse:
        """Cancel an authorisation that has not been captured."""
        return self._modify(CANCEL_TYPE, request)

    def refund(self, request: Refund) -> ModificationResponse:
        """Refund all or part of a captured payment."""
        return self._modify(REFUND_TYPE, request)

    def cancel_or_refund(self, request: CancelOrRefund) -> ModificationResponse:
        """Cancel when not yet captured, otherwise refund in full."""
        return self._modify(CANCEL_OR_REFUND_TYPE, request)

    def _modify(self, request_type: str, request) -> ModificationResponse:
        result = self._call(PAYMENT_SERVICE, request_type, request, ModificationResponse)
        self.client.logger.info(
            "adyen_modification_received",
            request_type=request_type,
            original_reference=request.original_reference,
            psp_reference=result.psp_reference,
            response=result.response,
        )
        return result
