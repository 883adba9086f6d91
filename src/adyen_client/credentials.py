"""API credentials bound to an Adyen environment."""

from dataclasses import dataclass, field

from adyen_client.environment import Environment


@dataclass(frozen=True)
class Credentials:
    """
    Immutable credential set.

    Backend API calls authenticate with ``username``/``password`` (a web
    service user, e.g. ``ws@Company.YourCompany``) over HTTP basic auth.
    HPP calls are unauthenticated but signed with the skin's ``hmac`` key.

    Users can be created at https://ca-test.adyen.com/ca/ca/config/users.shtml,
    skins at https://ca-test.adyen.com/ca/ca/skin/skins.shtml.
    """

    environment: Environment
    username: str
    password: str = field(repr=False)
    hmac: str | None = field(default=None, repr=False)

    @property
    def has_hmac(self) -> bool:
        return bool(self.hmac)

    @property
    def basic_auth(self) -> tuple[str, str]:
        """``(username, password)`` pair in the form httpx expects for basic auth."""
        return (self.username, self.password)
