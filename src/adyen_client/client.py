"""Adyen API client.

Holds credentials and client configuration, and executes requests against
the two endpoint families Adyen exposes:

- backend API: ``POST`` with a JSON body, authenticated with basic auth
- Hosted Payment Page: ``GET`` with query-string parameters, unauthenticated
  (integrity is protected by the ``merchantSig`` parameter instead)

Example:

    client = Adyen(TESTING, "ws@Company.Example", "secret", merchant_account="ExampleCOM")
    result = client.payment.authorise(Authorise(...))
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import httpx

from adyen_client.config import (
    API_VERSION,
    DEFAULT_CURRENCY,
    DEFAULT_TIMEOUT_SECONDS,
    AdyenSettings,
)
from adyen_client.credentials import Credentials
from adyen_client.environment import Environment
from adyen_client.gateways.modification import ModificationGateway
from adyen_client.gateways.payment import PaymentGateway
from adyen_client.gateways.recurring import RecurringGateway
from adyen_client.logging_config import get_logger, redact
from adyen_client.models.common import AdyenModel
from adyen_client.models.exceptions import RequestTimeout, TransportError
from adyen_client.models.hpp import HppRequest
from adyen_client.response import Response


class Adyen:
    """
    Adyen API client.

    ``currency`` and ``merchant_account`` are stored for the caller's
    convenience only. Requests are never populated from them; every request
    entity carries its own merchant account and amount currency.
    """

    def __init__(
        self,
        environment: Environment,
        username: str,
        password: str,
        hmac_key: str | None = None,
        *,
        currency: str = DEFAULT_CURRENCY,
        merchant_account: str = "",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Any = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the client.

        Args:
            environment: Platform to call (``TESTING``, ``PRODUCTION`` or a
                ``production_environment(...)`` result)
            username: Web service user for backend API calls
            password: Password of the web service user
            hmac_key: Hex encoded HMAC key of the HPP skin; required only for
                Hosted Payment Page calls
            currency: Default currency stored on the client
            merchant_account: Default merchant account stored on the client
            timeout_seconds: Request timeout, read at call time
            logger: structlog compatible logger; defaults to the module logger
            http_client: Pre-configured httpx client (proxies, transports)
        """
        self.credentials = Credentials(
            environment=environment,
            username=username,
            password=password,
            hmac=hmac_key,
        )
        self.currency = currency
        self.merchant_account = merchant_account
        self.timeout_seconds = timeout_seconds
        self.logger = logger if logger is not None else get_logger(__name__)
        self.http_client = http_client or httpx.Client(timeout=timeout_seconds)

    @classmethod
    def from_settings(cls, settings: AdyenSettings | None = None, **kwargs: Any) -> "Adyen":
        """
        Create a client from ``AdyenSettings``.

        Args:
            settings: Settings to use; read from ``ADYEN_*`` variables when omitted
            **kwargs: Extra keyword arguments for the constructor (logger, http_client)

        Raises:
            ConfigurationError: If the configured environment is unknown
        """
        settings = settings or AdyenSettings()
        environment = Environment.from_name(settings.environment, settings.live_url_prefix)
        return cls(
            environment,
            settings.username,
            settings.password,
            settings.hmac,
            currency=settings.currency,
            merchant_account=settings.merchant_account,
            timeout_seconds=settings.timeout_seconds,
            **kwargs,
        )

    @property
    def environment(self) -> Environment:
        return self.credentials.environment

    def attach_logger(self, logger: Any) -> None:
        """Replace the logger used for request/response logging."""
        self.logger = logger

    def client_url(self, client_id: str) -> str:
        """
        URL of the script that encrypts card data in the shopper's browser.

        Args:
            client_id: Library token from the Customer Area
        """
        return self.environment.client_url_for(client_id)

    def adyen_url(self, service: str, request_type: str) -> str:
        """Backend endpoint, e.g. ``.../Payment/v25/authorise/``."""
        return f"{self.environment.base_url(service, API_VERSION)}/{request_type}/"

    def hpp_url(self, request_type: str, params: Mapping[str, str] | None = None) -> str:
        """HPP page URL, with ``params`` encoded in key order when given."""
        url = self.environment.hpp_url_for(request_type)
        if params:
            url = f"{url}?{urlencode(sorted(params.items()))}"
        return url

    @property
    def payment(self) -> PaymentGateway:
        return PaymentGateway(self)

    @property
    def modification(self) -> ModificationGateway:
        return ModificationGateway(self)

    @property
    def recurring(self) -> RecurringGateway:
        return RecurringGateway(self)

    def execute(self, service: str, request_type: str, entity: AdyenModel) -> Response:
        """
        POST ``entity`` as JSON to a backend endpoint with basic auth.

        Args:
            service: Backend service (``PAYMENT_SERVICE``, ``RECURRING_SERVICE``)
            request_type: Endpoint within the service, e.g. "authorise"
            entity: Request entity

        Returns:
            The 2xx response

        Raises:
            APIError: Classified subclass for any non-2xx reply
            RequestTimeout: If the request timed out
            TransportError: On connection level failures
        """
        url = self.adyen_url(service, request_type)
        payload = entity.to_payload()

        self.logger.debug(
            "adyen_request",
            method="POST",
            request_type=request_type,
            url=url,
            body=redact(payload),
        )

        http_response = self._send(
            "POST",
            url,
            request_type,
            json=payload,
            headers={"Content-Type": "application/json"},
            auth=self.credentials.basic_auth,
        )
        response = self._wrap(http_response, url, request_type)

        error = response.api_error()
        if error is not None:
            self.logger.warning(
                "adyen_api_error",
                request_type=request_type,
                status_code=error.status_code,
                error_code=error.error_code,
                error_type=error.error_type,
                message=error.message,
            )
            raise error

        return response

    def execute_hpp(self, request_type: str, entity: HppRequest) -> Response:
        """
        GET an HPP endpoint with ``entity`` encoded as query parameters.

        No authentication header is sent. The response is returned whatever
        its status; callers classify it with ``Response.raise_for_error``.

        Raises:
            RequestTimeout: If the request timed out
            TransportError: On connection level failures
        """
        url = self.hpp_url(request_type, entity.to_query_params())

        self.logger.debug("adyen_request", method="GET", request_type=request_type, url=url)

        http_response = self._send("GET", url, request_type)
        return self._wrap(http_response, url, request_type)

    def _send(self, method: str, url: str, request_type: str, **kwargs: Any) -> httpx.Response:
        try:
            return self.http_client.request(method, url, timeout=self.timeout_seconds, **kwargs)

        except httpx.TimeoutException as e:
            self.logger.error(
                "adyen_transport_error",
                request_type=request_type,
                url=url,
                error_type="timeout",
                error=str(e),
            )
            raise RequestTimeout(f"Adyen {request_type} request timed out") from e

        except httpx.RequestError as e:
            self.logger.error(
                "adyen_transport_error",
                request_type=request_type,
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise TransportError(f"Adyen {request_type} request error: {e}") from e

    def _wrap(self, http_response: httpx.Response, url: str, request_type: str) -> Response:
        response = Response.from_httpx(http_response, url)
        self.logger.debug(
            "adyen_response",
            request_type=request_type,
            url=url,
            status_code=response.status_code,
            body=response.text,
        )
        return response

    def close(self) -> None:
        """Close the HTTP client connection pool."""
        self.http_client.close()

    def __enter__(self) -> "Adyen":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
