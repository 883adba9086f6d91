"""Hosted Payment Page entities.

HPP requests are sent as query strings rather than JSON, so these models
render to flat ``str -> str`` parameter maps.
"""

from pydantic import Field

from adyen_client.models.common import AdyenModel


class HppRequest(AdyenModel):
    """Base for query-string encoded HPP requests carrying a ``merchantSig``."""

    merchant_sig: str | None = None

    def to_query_params(self) -> dict[str, str]:
        """Flat, string valued parameters in Adyen naming; unset and empty values are left out."""
        params = self.model_dump(by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in params.items() if str(value) != ""}


class DirectoryLookupRequest(HppRequest):
    """Lists the payment methods available for a skin, amount and country."""

    currency_code: str
    merchant_account: str
    payment_amount: int
    skin_code: str
    merchant_reference: str
    session_validity: str
    ship_before_date: str | None = None
    country_code: str | None = None
    shopper_locale: str | None = None


class SkipHppRequest(HppRequest):
    """Redirect parameters that send the shopper straight to a payment method."""

    merchant_reference: str
    payment_amount: int
    currency_code: str
    skin_code: str
    merchant_account: str
    session_validity: str
    brand_code: str
    ship_before_date: str | None = None
    shopper_locale: str | None = None
    country_code: str | None = None
    issuer_id: str | None = None
    shopper_email: str | None = None
    shopper_reference: str | None = None
    res_url: str | None = Field(default=None, alias="resURL")


class Issuer(AdyenModel):
    issuer_id: str
    name: str


class Logos(AdyenModel):
    normal: str | None = None
    small: str | None = None
    tiny: str | None = None


class PaymentMethod(AdyenModel):
    brand_code: str
    name: str
    logos: Logos | None = None
    issuers: list[Issuer] = Field(default_factory=list)


class DirectoryLookupResponse(AdyenModel):
    payment_methods: list[PaymentMethod] = Field(default_factory=list)
