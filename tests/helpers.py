"""HTTP helpers shared by the unit tests."""

import json

import httpx

TEST_USERNAME = "ws@Company.Test"
TEST_PASSWORD = "test-password"
TEST_MERCHANT_ACCOUNT = "TestMerchantCOM"

# Example skin key from Adyen's HMAC documentation
TEST_HMAC_KEY = "DFB1EB5485895CFA84146406857104ABB4CBCABDC8AAF103A624C8F6A3EAAB00"


def adyen_response(
    status_code: int = 200,
    payload: object | None = None,
    text: str | None = None,
) -> httpx.Response:
    """Build a real httpx response carrying a JSON payload or raw text."""
    if text is not None:
        return httpx.Response(status_code, text=text)
    return httpx.Response(status_code, json=payload if payload is not None else {})


class RecordingTransport:
    """httpx transport handler that records requests and replays a canned response."""

    def __init__(self, response: httpx.Response | None = None):
        self.response = response or adyen_response()
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.response.status_code,
            content=self.response.content,
            headers=self.response.headers,
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)
