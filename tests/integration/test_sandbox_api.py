"""Integration tests against the Adyen test platform."""

from datetime import datetime, timedelta, timezone

import pytest

from adyen_client.models import (
    Amount,
    Authorise,
    AuthenticationError,
    Cancel,
    Capture,
    Card,
    DirectoryLookupRequest,
    Recurring,
    RecurringDetailsRequest,
    Refund,
)

# Adyen test card that is always authorised
TEST_CARD = Card(
    number="4111111111111111",
    expiry_month="03",
    expiry_year="2030",
    cvc="737",
    holder_name="John Smith",
)


def authorise(client, reference: str, amount: Amount, **kwargs):
    request = Authorise(
        amount=amount,
        merchant_account=client.merchant_account,
        reference=reference,
        card=TEST_CARD,
        **kwargs,
    )
    return client.payment.authorise(request)


def test_authorise_and_capture(sandbox_client, reference):
    amount = Amount(value=1000, currency=sandbox_client.currency)

    result = authorise(sandbox_client, reference, amount)
    assert result.is_authorised
    assert result.psp_reference

    capture = sandbox_client.modification.capture(
        Capture(
            merchant_account=sandbox_client.merchant_account,
            original_reference=result.psp_reference,
            modification_amount=amount,
        )
    )
    assert capture.response == "[capture-received]"

    refund = sandbox_client.modification.refund(
        Refund(
            merchant_account=sandbox_client.merchant_account,
            original_reference=result.psp_reference,
            modification_amount=amount,
        )
    )
    assert refund.response == "[refund-received]"


def test_authorise_and_cancel(sandbox_client, reference):
    result = authorise(sandbox_client, reference, Amount(value=500, currency=sandbox_client.currency))

    cancel = sandbox_client.modification.cancel(
        Cancel(merchant_account=sandbox_client.merchant_account, original_reference=result.psp_reference)
    )
    assert cancel.response == "[cancel-received]"


def test_recurring_details_after_authorise(sandbox_client, reference):
    shopper_reference = f"shopper-{reference}"
    authorise(
        sandbox_client,
        reference,
        Amount(value=100, currency=sandbox_client.currency),
        shopper_reference=shopper_reference,
        shopper_email="s.hopper@example.com",
        recurring=Recurring(contract="RECURRING"),
    )

    result = sandbox_client.recurring.list_recurring_details(
        RecurringDetailsRequest(
            merchant_account=sandbox_client.merchant_account,
            shopper_reference=shopper_reference,
            recurring=Recurring(contract="RECURRING"),
        )
    )
    assert result.recurring_details


def test_wrong_credentials(sandbox_settings, reference):
    from adyen_client import Adyen

    settings = sandbox_settings.model_copy(update={"password": "wrong-password"})
    with Adyen.from_settings(settings) as client:
        with pytest.raises(AuthenticationError):
            authorise(client, reference, Amount(value=100, currency="EUR"))


def test_directory_lookup(sandbox_client, skin_code, reference):
    if not sandbox_client.credentials.has_hmac:
        pytest.skip("ADYEN_HMAC is required for HPP tests")

    session_validity = (datetime.now(timezone.utc) + timedelta(hours=1)).strftime("%Y-%m-%dT%H:%M:%SZ")
    result = sandbox_client.payment.directory_lookup(
        DirectoryLookupRequest(
            currency_code="EUR",
            merchant_account=sandbox_client.merchant_account,
            payment_amount=1000,
            skin_code=skin_code,
            merchant_reference=reference,
            session_validity=session_validity,
            country_code="NL",
        )
    )
    assert result.payment_methods
