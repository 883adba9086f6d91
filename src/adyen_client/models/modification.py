"""Modification entities: capture, cancel and refund of an existing payment."""

from typing import Any

from adyen_client.models.common import AdyenModel, Amount


class Capture(AdyenModel):
    """Capture ``modification_amount`` of the authorisation ``original_reference``."""

    merchant_account: str
    original_reference: str
    modification_amount: Amount
    reference: str | None = None


class Cancel(AdyenModel):
    merchant_account: str
    original_reference: str
    reference: str | None = None


class Refund(AdyenModel):
    merchant_account: str
    original_reference: str
    modification_amount: Amount
    reference: str | None = None


class CancelOrRefund(AdyenModel):
    """Cancels the payment if not yet captured, otherwise refunds it in full."""

    merchant_account: str
    original_reference: str
    reference: str | None = None


class ModificationResponse(AdyenModel):
    """
    Acknowledgement of a modification.

    ``response`` is e.g. ``[capture-received]``. The final outcome arrives
    asynchronously through notifications.
    """

    psp_reference: str | None = None
    response: str | None = None
    additional_data: dict[str, Any] | None = None
