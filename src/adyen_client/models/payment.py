"""Payment service entities: authorisation requests and their results."""

from enum import Enum
from typing import Any

from pydantic import Field

from adyen_client.models.common import (
    AdditionalData,
    Address,
    AdyenModel,
    Amount,
    BrowserInfo,
    Card,
    Name,
    Recurring,
)


class ResultCode(str, Enum):
    """Authorisation outcome reported in ``resultCode``."""

    AUTHORISED = "Authorised"
    REFUSED = "Refused"
    ERROR = "Error"
    CANCELLED = "Cancelled"
    RECEIVED = "Received"
    PENDING = "Pending"
    REDIRECT_SHOPPER = "RedirectShopper"


class Authorise(AdyenModel):
    """
    Payment authorisation request.

    Either ``card`` (raw card details), ``additional_data.encrypted_card``
    (client-side encrypted card) or ``selected_recurring_detail_reference``
    (stored card) identifies the payment method.
    """

    amount: Amount
    merchant_account: str
    reference: str
    card: Card | None = None
    additional_data: AdditionalData | None = None
    shopper_reference: str | None = None
    shopper_email: str | None = None
    shopper_ip: str | None = Field(default=None, alias="shopperIP")
    shopper_locale: str | None = None
    shopper_name: Name | None = None
    shopper_interaction: str | None = None
    billing_address: Address | None = None
    delivery_address: Address | None = None
    browser_info: BrowserInfo | None = None
    recurring: Recurring | None = None
    selected_recurring_detail_reference: str | None = None
    fraud_offset: int | None = None
    session_id: str | None = None


class AuthoriseEncrypted(Authorise):
    """Authorisation with card data encrypted by Adyen's client-side library."""

    additional_data: AdditionalData


class Authorise3D(AdyenModel):
    """Completes a 3-D Secure authorisation after the shopper returns from the issuer."""

    md: str
    pa_response: str
    merchant_account: str
    browser_info: BrowserInfo | None = None
    shopper_ip: str | None = Field(default=None, alias="shopperIP")


class AuthoriseResponse(AdyenModel):
    """Reply of ``authorise`` and ``authorise3d``."""

    psp_reference: str | None = None
    result_code: str | None = None
    auth_code: str | None = None
    refusal_reason: str | None = None
    issuer_url: str | None = None
    md: str | None = None
    pa_request: str | None = None
    additional_data: dict[str, Any] | None = None

    @property
    def is_authorised(self) -> bool:
        return self.result_code == ResultCode.AUTHORISED.value

    @property
    def requires_redirect(self) -> bool:
        """True when the shopper must be sent to ``issuer_url`` for 3-D Secure."""
        return self.result_code == ResultCode.REDIRECT_SHOPPER.value
