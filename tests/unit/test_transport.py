"""Unit tests for request execution and transport error handling."""

from unittest.mock import patch

import httpx
import pytest

from adyen_client import PAYMENT_SERVICE
from adyen_client.models import (
    Amount,
    Cancel,
    DirectoryLookupRequest,
    InvalidResponseError,
    RequestTimeout,
    TransportError,
    ValidationError,
)
from tests.helpers import TEST_MERCHANT_ACCOUNT, adyen_response


@pytest.fixture
def cancel_request() -> Cancel:
    return Cancel(merchant_account=TEST_MERCHANT_ACCOUNT, original_reference="8313547924770610")


class TestExecute:
    def test_returns_response_envelope(self, client, cancel_request):
        with patch.object(client.http_client, "request", return_value=adyen_response(200, {"response": "[cancel-received]"})):
            response = client.execute(PAYMENT_SERVICE, "cancel", cancel_request)

        assert response.status_code == 200
        assert response.is_success
        assert response.url.endswith("/Payment/v25/cancel/")
        assert response.json() == {"response": "[cancel-received]"}

    def test_api_error_is_logged_and_raised(self, client, logger, cancel_request):
        body = {"status": 422, "errorCode": "167", "message": "Original pspReference required for this operation", "errorType": "validation"}

        with patch.object(client.http_client, "request", return_value=adyen_response(422, body)):
            with pytest.raises(ValidationError):
                client.execute(PAYMENT_SERVICE, "cancel", cancel_request)

        logger.warning.assert_called_once_with(
            "adyen_api_error",
            request_type="cancel",
            status_code=422,
            error_code="167",
            error_type="validation",
            message="Original pspReference required for this operation",
        )

    def test_timeout(self, client, cancel_request):
        with patch.object(client.http_client, "request", side_effect=httpx.ReadTimeout("Timeout")):
            with pytest.raises(RequestTimeout, match="Adyen cancel request timed out") as exc_info:
                client.execute(PAYMENT_SERVICE, "cancel", cancel_request)

        assert isinstance(exc_info.value, TransportError)
        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    def test_connection_error(self, client, logger, cancel_request):
        with patch.object(client.http_client, "request", side_effect=httpx.ConnectError("Connection refused")):
            with pytest.raises(TransportError, match="Adyen cancel request error") as exc_info:
                client.execute(PAYMENT_SERVICE, "cancel", cancel_request)

        assert not isinstance(exc_info.value, RequestTimeout)
        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "adyen_transport_error"
        assert logger.error.call_args[1]["error_type"] == "ConnectError"

    def test_unexpected_success_body(self, client, cancel_request):
        with patch.object(client.http_client, "request", return_value=adyen_response(200, text="<html>maintenance</html>")):
            with pytest.raises(InvalidResponseError):
                client.modification.cancel(cancel_request)

    def test_request_body_redacted_in_logs(self, client, logger):
        from adyen_client.models import Authorise, Card

        request = Authorise(
            amount=Amount(value=1000, currency="EUR"),
            merchant_account=TEST_MERCHANT_ACCOUNT,
            reference="order-1",
            card=Card(
                number="4111111111111111",
                expiry_month="08",
                expiry_year="2018",
                cvc="737",
                holder_name="John Smith",
            ),
        )

        with patch.object(client.http_client, "request", return_value=adyen_response(200, {"resultCode": "Authorised"})):
            client.execute(PAYMENT_SERVICE, "authorise", request)

        request_log = logger.debug.call_args_list[0]
        assert request_log[0][0] == "adyen_request"
        logged_card = request_log[1]["body"]["card"]
        assert logged_card["number"] == "***"
        assert logged_card["cvc"] == "***"
        assert logged_card["holderName"] == "John Smith"


class TestExecuteHpp:
    @pytest.fixture
    def lookup_request(self) -> DirectoryLookupRequest:
        return DirectoryLookupRequest(
            currency_code="EUR",
            merchant_account=TEST_MERCHANT_ACCOUNT,
            payment_amount=1000,
            skin_code="X7hsNDWp",
            merchant_reference="order-1",
            session_validity="2017-07-17T13:42:40Z",
        )

    def test_get_without_auth(self, client, lookup_request):
        with patch.object(client.http_client, "request", return_value=adyen_response(200, {"paymentMethods": []})):
            client.execute_hpp("directory", lookup_request)

            call_args = client.http_client.request.call_args
            method, url = call_args[0]
            assert method == "GET"
            assert url.startswith("https://test.adyen.com/hpp/directory.shtml?")
            assert "auth" not in call_args[1]
            assert "json" not in call_args[1]

    def test_error_status_is_returned_not_raised(self, client, lookup_request):
        with patch.object(client.http_client, "request", return_value=adyen_response(500, text="down")):
            response = client.execute_hpp("directory", lookup_request)

        assert response.is_error
        assert response.status_code == 500

    def test_timeout(self, client, lookup_request):
        with patch.object(client.http_client, "request", side_effect=httpx.ConnectTimeout("Timeout")):
            with pytest.raises(RequestTimeout):
                client.execute_hpp("directory", lookup_request)
