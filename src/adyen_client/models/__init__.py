"""Request/response entities and exceptions for the Adyen client."""

from adyen_client.models.common import (
    AdditionalData,
    Address,
    Amount,
    BrowserInfo,
    Card,
    Name,
    Recurring,
    currency_decimals,
)
from adyen_client.models.exceptions import (
    AdyenError,
    APIError,
    AuthenticationError,
    ClientRequestError,
    ConfigurationError,
    InvalidResponseError,
    PermissionDenied,
    RequestTimeout,
    ServerError,
    TransportError,
    ValidationError,
)
from adyen_client.models.hpp import (
    DirectoryLookupRequest,
    DirectoryLookupResponse,
    Issuer,
    PaymentMethod,
    SkipHppRequest,
)
from adyen_client.models.modification import (
    Cancel,
    CancelOrRefund,
    Capture,
    ModificationResponse,
    Refund,
)
from adyen_client.models.payment import (
    Authorise,
    Authorise3D,
    AuthoriseEncrypted,
    AuthoriseResponse,
    ResultCode,
)
from adyen_client.models.recurring import (
    RecurringDetail,
    RecurringDetailsRequest,
    RecurringDetailsResult,
    RecurringDisableRequest,
    RecurringDisableResponse,
)

__all__ = [
    "AdditionalData",
    "Address",
    "Amount",
    "BrowserInfo",
    "Card",
    "Name",
    "Recurring",
    "currency_decimals",
    "AdyenError",
    "APIError",
    "AuthenticationError",
    "ClientRequestError",
    "ConfigurationError",
    "InvalidResponseError",
    "PermissionDenied",
    "RequestTimeout",
    "ServerError",
    "TransportError",
    "ValidationError",
    "DirectoryLookupRequest",
    "DirectoryLookupResponse",
    "Issuer",
    "PaymentMethod",
    "SkipHppRequest",
    "Cancel",
    "CancelOrRefund",
    "Capture",
    "ModificationResponse",
    "Refund",
    "Authorise",
    "Authorise3D",
    "AuthoriseEncrypted",
    "AuthoriseResponse",
    "ResultCode",
    "RecurringDetail",
    "RecurringDetailsRequest",
    "RecurringDetailsResult",
    "RecurringDisableRequest",
    "RecurringDisableResponse",
]
