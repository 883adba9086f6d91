"""Raw HTTP response envelope and status based error classification."""

import json
from dataclasses import dataclass, field
from typing import TypeVar

import httpx
import pydantic

from adyen_client.models.common import AdyenModel
from adyen_client.models.exceptions import (
    APIError,
    AuthenticationError,
    ClientRequestError,
    InvalidResponseError,
    PermissionDenied,
    ServerError,
    ValidationError,
)

ModelT = TypeVar("ModelT", bound=AdyenModel)


@dataclass
class Response:
    """
    An Adyen reply before it is decoded.

    The envelope keeps the raw status code and body bytes so callers can
    inspect replies the typed models do not cover.
    """

    status_code: int
    body: bytes
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_httpx(cls, response: httpx.Response, url: str = "") -> "Response":
        return cls(
            status_code=response.status_code,
            body=response.content,
            url=url,
            headers=dict(response.headers),
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_error(self) -> bool:
        """Any non-2xx status is a failure."""
        return not self.is_success

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> object:
        """
        Decode the body as JSON.

        Raises:
            InvalidResponseError: If the body is not valid JSON
        """
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidResponseError(
                f"Response body is not valid JSON (status: {self.status_code})"
            ) from e

    def api_error(self) -> APIError | None:
        """
        Classify the response.

        Returns:
            None for 2xx replies, otherwise the APIError subclass matching the
            status code and Adyen's ``errorType``
        """
        if self.is_success:
            return None

        message = self.text.strip() or f"HTTP {self.status_code}"
        error_code = error_type = psp_reference = None

        try:
            payload = json.loads(self.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None

        if isinstance(payload, dict):
            message = str(payload.get("message") or message)
            error_code = _optional_str(payload.get("errorCode"))
            error_type = _optional_str(payload.get("errorType"))
            psp_reference = _optional_str(payload.get("pspReference"))

        return _error_class(self.status_code, error_type)(
            status_code=self.status_code,
            message=message,
            error_code=error_code,
            error_type=error_type,
            psp_reference=psp_reference,
            body=self.body,
        )

    def raise_for_error(self) -> "Response":
        """Raise the classified APIError for non-2xx replies, else return self."""
        error = self.api_error()
        if error is not None:
            raise error
        return self

    def parse(self, model: type[ModelT]) -> ModelT:
        """
        Decode the body into ``model``.

        Raises:
            InvalidResponseError: If the body is not JSON of the expected shape
        """
        try:
            return model.model_validate_json(self.body)
        except pydantic.ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected {model.__name__} payload (status: {self.status_code})"
            ) from e


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


def _error_class(status_code: int, error_type: str | None) -> type[APIError]:
    if status_code >= 500:
        return ServerError
    if status_code == 401:
        return AuthenticationError
    if status_code == 403:
        return PermissionDenied
    if status_code == 422 or error_type == "validation":
        return ValidationError
    if 400 <= status_code < 500:
        return ClientRequestError
    # 1xx/3xx are not expected from Adyen but are still failures.
    return APIError
