"""Adyen endpoint sets for the test and live platforms."""

from dataclasses import dataclass

from adyen_client.models.exceptions import ConfigurationError


@dataclass(frozen=True)
class Environment:
    """
    Base URLs of one Adyen platform.

    Attributes:
        api_url: Backend API servlet root (JSON, basic auth)
        client_url: Client-side encryption library root
        hpp_url: Hosted Payment Page root (query string, unauthenticated)
    """

    api_url: str
    client_url: str
    hpp_url: str

    def base_url(self, service: str, version: str) -> str:
        """Versioned root of a backend service, e.g. ``.../Payment/v25``."""
        return f"{self.api_url}/{service}/{version}"

    def client_url_for(self, client_id: str) -> str:
        """URL of the client-side encryption script for ``client_id``."""
        return f"{self.client_url}{client_id}.shtml"

    def hpp_url_for(self, request_type: str) -> str:
        """URL of an HPP page, e.g. ``.../hpp/directory.shtml``."""
        return f"{self.hpp_url}{request_type}.shtml"

    @classmethod
    def from_name(cls, name: str, live_url_prefix: str | None = None) -> "Environment":
        """
        Resolve an environment from configuration.

        Args:
            name: "test" or "live"
            live_url_prefix: "<random>-<company>" prefix of the live endpoint,
                shown in the Customer Area under Account > API URLs

        Raises:
            ConfigurationError: If the name is unknown or the prefix is malformed
        """
        normalized = name.strip().lower()
        if normalized in ("test", "testing"):
            return TESTING
        if normalized in ("live", "production"):
            if not live_url_prefix:
                return PRODUCTION
            random, sep, company_name = live_url_prefix.partition("-")
            if not sep or not random or not company_name:
                raise ConfigurationError(
                    f"live_url_prefix must look like '<random>-<company>', got {live_url_prefix!r}"
                )
            return production_environment(random, company_name)
        raise ConfigurationError(f"Unknown Adyen environment: {name!r}")


TESTING = Environment(
    api_url="https://pal-test.adyen.com/pal/servlet",
    client_url="https://test.adyen.com/hpp/cse/js/",
    hpp_url="https://test.adyen.com/hpp/",
)

PRODUCTION = Environment(
    api_url="https://pal-live.adyen.com/pal/servlet",
    client_url="https://live.adyen.com/hpp/cse/js/",
    hpp_url="https://live.adyen.com/hpp/",
)


def production_environment(random: str, company_name: str) -> Environment:
    """Live environment using the merchant specific endpoint prefix."""
    return Environment(
        api_url=f"https://{random}-{company_name}-pal-live.adyenpayments.com/pal/servlet",
        client_url=PRODUCTION.client_url,
        hpp_url=PRODUCTION.hpp_url,
    )
