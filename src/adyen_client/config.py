"""Configuration management for the Adyen client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY = "EUR"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Backend API version used in endpoint paths
API_VERSION = "v25"

# Backend services
PAYMENT_SERVICE = "Payment"
RECURRING_SERVICE = "Recurring"


class AdyenSettings(BaseSettings):
    """Client settings loaded from ``ADYEN_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ADYEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Platform
    environment: str = Field(default="test", description="Adyen platform: test or live")
    live_url_prefix: str | None = Field(
        default=None,
        description="'<random>-<company>' prefix of the live endpoint",
    )

    # Credentials
    username: str = Field(default="", description="Web service user name")
    password: str = Field(default="", description="Web service user password")
    hmac: str | None = Field(default=None, description="Hex encoded HPP skin HMAC key")

    # Defaults stored on the client
    merchant_account: str = Field(default="", description="Default merchant account")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Default currency")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Request timeout"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")
