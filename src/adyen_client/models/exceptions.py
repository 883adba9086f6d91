"""Custom exceptions for the Adyen client."""


class AdyenError(Exception):
    """Base exception for all Adyen client errors."""

    pass


class ConfigurationError(AdyenError):
    """
    Raised when the client is configured in a way that cannot serve the call.

    Examples:
    - Unknown environment name in settings
    - HPP call on a client created without an HMAC key
    """

    pass


class TransportError(AdyenError):
    """
    Raised when the request never produced an HTTP response.

    Connection refused, DNS failures, TLS errors and similar. The library
    does not retry; callers decide whether the operation is safe to repeat.
    """

    pass


class RequestTimeout(TransportError):
    """Raised when the request exceeded the configured timeout."""

    pass


class InvalidResponseError(AdyenError):
    """Raised when a successful response body is not the expected JSON."""

    pass


class APIError(AdyenError):
    """
    Raised when Adyen answers with a non-2xx status code.

    Adyen reports errors as a JSON document with ``status``, ``errorCode``,
    ``message`` and ``errorType`` fields. When the body has another shape
    (401 replies are plain HTML) the raw text becomes the message.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str | None = None,
        error_type: str | None = None,
        psp_reference: str | None = None,
        body: bytes = b"",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        self.error_type = error_type
        self.psp_reference = psp_reference
        self.body = body

    def __str__(self) -> str:
        details = []
        if self.error_code:
            details.append(f"errorCode: {self.error_code}")
        if self.error_type:
            details.append(f"errorType: {self.error_type}")
        suffix = f" ({', '.join(details)})" if details else ""
        return f"[{self.status_code}] {self.message}{suffix}"


class ClientRequestError(APIError):
    """4xx reply: the request was rejected and must be fixed before resending."""

    pass


class AuthenticationError(ClientRequestError):
    """401 - the web service user credentials were rejected."""

    pass


class PermissionDenied(ClientRequestError):
    """403 - the web service user lacks the role required for the endpoint."""

    pass


class ValidationError(ClientRequestError):
    """422, or any reply with errorType "validation"."""

    pass


class ServerError(APIError):
    """5xx reply from Adyen."""

    pass
