"""Recurring service entities for stored payment details."""

from pydantic import Field

from adyen_client.models.common import Address, AdyenModel, Name, Recurring


class RecurringDetailsRequest(AdyenModel):
    merchant_account: str
    shopper_reference: str
    recurring: Recurring | None = None


class StoredCard(AdyenModel):
    """Card summary returned for a stored detail. Never contains the full PAN."""

    number: str | None = Field(default=None, repr=False)
    expiry_month: str | None = None
    expiry_year: str | None = None
    holder_name: str | None = None


class RecurringDetail(AdyenModel):
    recurring_detail_reference: str
    variant: str | None = None
    creation_date: str | None = None
    alias: str | None = None
    alias_type: str | None = None
    first_psp_reference: str | None = None
    payment_method_variant: str | None = None
    contract_types: list[str] = Field(default_factory=list)
    card: StoredCard | None = None
    billing_address: Address | None = None
    shopper_name: Name | None = None


class RecurringDetailItem(AdyenModel):
    """Adyen wraps each stored detail in a ``RecurringDetail`` object."""

    recurring_detail: RecurringDetail = Field(alias="RecurringDetail")


class RecurringDetailsResult(AdyenModel):
    creation_date: str | None = None
    shopper_reference: str | None = None
    last_known_shopper_email: str | None = None
    details: list[RecurringDetailItem] = Field(default_factory=list)

    @property
    def recurring_details(self) -> list[RecurringDetail]:
        """Stored details without the wrapping objects."""
        return [item.recurring_detail for item in self.details]


class RecurringDisableRequest(AdyenModel):
    """
    Disable stored details of a shopper.

    Without ``recurring_detail_reference`` every detail of the shopper is
    disabled, optionally restricted to ``contract``.
    """

    merchant_account: str
    shopper_reference: str
    recurring_detail_reference: str | None = None
    contract: str | None = None


class RecurringDisableResponse(AdyenModel):
    response: str | None = None
