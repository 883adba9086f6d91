"""Payment gateway: authorisations and Hosted Payment Page helpers."""

from typing import TypeVar

from adyen_client.config import PAYMENT_SERVICE
from adyen_client.gateways.base import Gateway
from adyen_client.models.exceptions import ConfigurationError
from adyen_client.models.hpp import (
    DirectoryLookupRequest,
    DirectoryLookupResponse,
    HppRequest,
    SkipHppRequest,
)
from adyen_client.models.payment import (
    Authorise,
    Authorise3D,
    AuthoriseEncrypted,
    AuthoriseResponse,
)
from adyen_client.signature import calculate_merchant_sig

AUTHORISE_TYPE = "authorise"
AUTHORISE_3D_TYPE = "authorise3d"
DIRECTORY_LOOKUP_TYPE = "directory"
SKIP_DETAILS_TYPE = "skipDetails"

HppRequestT = TypeVar("HppRequestT", bound=HppRequest)


class PaymentGateway(Gateway):
    """
    Payment service operations.

    Backend calls (``authorise*``) use the client's basic auth credentials.
    HPP helpers (``directory_lookup``, ``hpp_redirect_url``) sign their
    parameters with the skin HMAC key instead and therefore need a client
    created with ``hmac_key``.
    """

    def authorise(self, request: Authorise) -> AuthoriseResponse:
        """
        Authorise a payment.

        Args:
            request: Authorisation with card details, encrypted card data or
                a stored recurring detail reference

        Returns:
            AuthoriseResponse; a refusal is a normal result, not an exception

        Raises:
            APIError: For non-2xx replies (validation failures, bad credentials)
        """
        return self._authorise(AUTHORISE_TYPE, request)

    def authorise_encrypted(self, request: AuthoriseEncrypted) -> AuthoriseResponse:
        """Authorise a payment with card data encrypted in the shopper's browser."""
        return self._authorise(AUTHORISE_TYPE, request)

    def authorise_3d(self, request: Authorise3D) -> AuthoriseResponse:
        """Finish a 3-D Secure payment with the ``MD``/``PaRes`` posted back by the issuer."""
        return self._authorise(AUTHORISE_3D_TYPE, request)

    def directory_lookup(self, request: DirectoryLookupRequest) -> DirectoryLookupResponse:
        """
        List the payment methods available on the Hosted Payment Page.

        Raises:
            ConfigurationError: If the client has no HMAC key
            APIError: For non-2xx replies
        """
        signed = self._sign(request)
        response = self.client.execute_hpp(DIRECTORY_LOOKUP_TYPE, signed)
        response.raise_for_error()
        return response.parse(DirectoryLookupResponse)

    def hpp_redirect_url(self, request: SkipHppRequest) -> str:
        """
        Build the signed URL that sends the shopper directly to a payment method.

        No request is made; the shopper's browser follows the URL.

        Raises:
            ConfigurationError: If the client has no HMAC key
        """
        signed = self._sign(request)
        return self.client.hpp_url(SKIP_DETAILS_TYPE, signed.to_query_params())

    def _authorise(self, request_type: str, request) -> AuthoriseResponse:
        result = self._call(PAYMENT_SERVICE, request_type, request, AuthoriseResponse)
        self.client.logger.info(
            "adyen_authorise_result",
            request_type=request_type,
            psp_reference=result.psp_reference,
            result_code=result.result_code,
            refusal_reason=result.refusal_reason,
        )
        return result

    def _sign(self, request: HppRequestT) -> HppRequestT:
        credentials = self.client.credentials
        if not credentials.has_hmac:
            raise ConfigurationError(
                "HMAC key is required for Hosted Payment Page requests; "
                "create the client with hmac_key"
            )
        params = request.model_copy(update={"merchant_sig": None}).to_query_params()
        merchant_sig = calculate_merchant_sig(params, credentials.hmac)
        return request.model_copy(update={"merchant_sig": merchant_sig})
