"""Shared building blocks for Adyen request and response entities.

Adyen's API uses camelCase field names. Every model here accepts either the
Python attribute name or the Adyen field name on input and always emits the
Adyen names, with unset optional fields left out of the payload.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ISO 4217 minor units that differ from the default of 2.
# https://docs.adyen.com/development-resources/currency-codes
CURRENCY_DECIMALS: dict[str, int] = {
    "BHD": 3,
    "CVE": 0,
    "DJF": 0,
    "GNF": 0,
    "IDR": 0,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "PYG": 0,
    "RWF": 0,
    "TND": 3,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
}


def currency_decimals(currency: str) -> int:
    """Number of decimal places Adyen expects for the given currency."""
    return CURRENCY_DECIMALS.get(currency.upper(), 2)


class AdyenModel(BaseModel):
    """Base model mapping snake_case attributes onto Adyen's field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a JSON request body."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Amount(AdyenModel):
    """
    Monetary amount in minor units.

    ``Amount(value=1000, currency="EUR")`` is EUR 10.00, while
    ``Amount(value=1000, currency="JPY")`` is JPY 1000.
    """

    value: int
    currency: str

    @classmethod
    def from_major(cls, value: Decimal | int | float | str, currency: str) -> "Amount":
        """Build an amount from a major unit value such as ``"10.99"``."""
        decimals = currency_decimals(currency)
        minor = (Decimal(str(value)) * (Decimal(10) ** decimals)).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
        return cls(value=int(minor), currency=currency.upper())

    def to_major(self) -> Decimal:
        """Amount expressed in major units."""
        return Decimal(self.value) / (Decimal(10) ** currency_decimals(self.currency))


class Card(AdyenModel):
    """Raw card details. Only PCI compliant integrations may send these."""

    number: str = Field(repr=False)
    expiry_month: str
    expiry_year: str
    holder_name: str
    cvc: str | None = Field(default=None, repr=False)


class Recurring(AdyenModel):
    """Recurring contract type, e.g. "RECURRING", "ONECLICK" or both comma separated."""

    contract: str
    recurring_detail_name: str | None = None


class BrowserInfo(AdyenModel):
    """Shopper browser details required for 3-D Secure."""

    accept_header: str
    user_agent: str


class Name(AdyenModel):
    first_name: str
    last_name: str


class Address(AdyenModel):
    street: str
    house_number_or_name: str
    postal_code: str
    city: str
    country: str
    state_or_province: str | None = None


class AdditionalData(AdyenModel):
    """
    Free form ``additionalData`` object.

    Client-side encrypted card data travels under the ``card.encrypted.json``
    key. Any other Adyen additional data key can be passed as an extra field.
    """

    encrypted_card: str | None = Field(default=None, alias="card.encrypted.json")
