"""HMAC-SHA256 ``merchantSig`` calculation for Hosted Payment Page requests.

Adyen verifies HPP parameters with a signature computed over a normalized
signing string:

1. Drop ``merchantSig`` itself.
2. Sort the remaining parameters by key.
3. Escape ``\\`` as ``\\\\`` and ``:`` as ``\\:`` in every key and value.
4. Join all keys, then all values, with ``:``.
5. HMAC-SHA256 the string with the hex-decoded skin key and base64 encode.
"""

import base64
import binascii
import hashlib
import hmac
from collections.abc import Mapping

from adyen_client.models.exceptions import ConfigurationError

SIGNATURE_FIELD = "merchantSig"


def escape_value(value: str) -> str:
    """Escape a key or value for the signing string."""
    return value.replace("\\", "\\\\").replace(":", "\\:")


def signing_string(params: Mapping[str, str]) -> str:
    """
    Build the string that gets signed.

    Args:
        params: HPP parameters in Adyen naming

    Returns:
        Escaped keys followed by escaped values, joined with ":"
    """
    keys = sorted(key for key in params if key != SIGNATURE_FIELD)
    escaped_keys = [escape_value(key) for key in keys]
    escaped_values = [escape_value(str(params[key])) for key in keys]
    return ":".join(escaped_keys + escaped_values)


def calculate_merchant_sig(params: Mapping[str, str], hmac_key: str) -> str:
    """
    Calculate the base64 encoded ``merchantSig`` for ``params``.

    Raises:
        ConfigurationError: If ``hmac_key`` is empty or not hex encoded
    """
    if not hmac_key:
        raise ConfigurationError("HMAC key is required to sign HPP requests")

    try:
        key = binascii.unhexlify(hmac_key)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError("HMAC key must be a hex encoded string") from e

    digest = hmac.new(key, signing_string(params).encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_params(params: Mapping[str, str], hmac_key: str) -> dict[str, str]:
    """Return a copy of ``params`` with ``merchantSig`` set."""
    signed = {key: value for key, value in params.items() if key != SIGNATURE_FIELD}
    signed[SIGNATURE_FIELD] = calculate_merchant_sig(signed, hmac_key)
    return signed
