"""Example usage of the Adyen client.

Configure credentials through the environment (or a .env file):

    ADYEN_USERNAME=ws@Company.YourCompany
    ADYEN_PASSWORD=...
    ADYEN_MERCHANT_ACCOUNT=YourCompanyCOM
    ADYEN_HMAC=...            # only for the HPP example
    ADYEN_SKIN_CODE=...       # only for the HPP example
"""

import os
import uuid
from datetime import datetime, timedelta, timezone

from adyen_client import Adyen, AdyenSettings
from adyen_client.logging_config import configure_logging_from_settings
from adyen_client.models import (
    AdyenError,
    Amount,
    APIError,
    Authorise,
    Capture,
    Card,
    ConfigurationError,
    Refund,
    SkipHppRequest,
    TransportError,
)


def example_authorise_capture_refund(client: Adyen) -> None:
    """Example: authorise a card payment, capture it, then refund half."""
    print("\n=== Example 1: Authorise, capture, refund ===\n")

    amount = Amount.from_major("10.99", client.currency)
    try:
        result = client.payment.authorise(
            Authorise(
                amount=amount,
                merchant_account=client.merchant_account,
                reference=f"order-{uuid.uuid4().hex[:8]}",
                card=Card(
                    number="4111111111111111",
                    expiry_month="03",
                    expiry_year="2030",
                    cvc="737",
                    holder_name="John Smith",
                ),
            )
        )
        print(f"Result: {result.result_code} (pspReference {result.psp_reference})")
        if not result.is_authorised:
            print(f"Refusal reason: {result.refusal_reason}")
            return

        capture = client.modification.capture(
            Capture(
                merchant_account=client.merchant_account,
                original_reference=result.psp_reference,
                modification_amount=amount,
            )
        )
        print(f"Capture: {capture.response}")

        refund = client.modification.refund(
            Refund(
                merchant_account=client.merchant_account,
                original_reference=result.psp_reference,
                modification_amount=Amount(value=amount.value // 2, currency=amount.currency),
            )
        )
        print(f"Refund: {refund.response}")

    except APIError as e:
        print(f"Adyen rejected the request: {e}")

    except TransportError as e:
        print(f"Could not reach Adyen: {e}")


def example_hpp_redirect(client: Adyen) -> None:
    """Example: build a signed redirect URL to the Hosted Payment Page."""
    print("\n=== Example 2: Hosted Payment Page redirect ===\n")

    session_validity = datetime.now(timezone.utc) + timedelta(hours=1)
    try:
        url = client.payment.hpp_redirect_url(
            SkipHppRequest(
                merchant_reference=f"order-{uuid.uuid4().hex[:8]}",
                payment_amount=1000,
                currency_code="EUR",
                skin_code=os.getenv("ADYEN_SKIN_CODE", ""),
                merchant_account=client.merchant_account,
                session_validity=session_validity.strftime("%Y-%m-%dT%H:%M:%SZ"),
                brand_code="ideal",
                shopper_locale="nl_NL",
            )
        )
        print(f"Redirect the shopper to:\n{url}")

    except ConfigurationError as e:
        print(f"HPP is not configured: {e}")


def main() -> None:
    settings = AdyenSettings()
    configure_logging_from_settings(settings)

    try:
        with Adyen.from_settings(settings) as client:
            print(f"Encryption library: {client.client_url('YOUR_LIBRARY_TOKEN')}")
            example_authorise_capture_refund(client)
            example_hpp_redirect(client)
    except AdyenError as e:
        print(f"Unexpected Adyen error: {e}")


if __name__ == "__main__":
    main()
