"""Canonical OAuth token-request and application records."""

from pydantic import BaseModel, Field, JsonValue

OAUTH_CLIENT_ID = "client_id"
OAUTH_CLIENT_SECRET = "client_secret"
VALIDITY_PERIOD = "validity_period"
APP_VALIDITY_PERIOD = "validityPeriod"
TOKEN_SCOPE = "tokenScope"


class TokenRequest(BaseModel):
    """Parameters sent to a key manager to obtain or validate a token.

    Fields are filled incrementally; a source that does not mention a field
    leaves its current value in place.
    """

    client_id: str | None = None
    client_secret: str | None = None
    validity_period: int | None = None
    scopes: list[str] | None = None


class OAuthAppInfo(BaseModel):
    """OAuth client application with free-form extra parameters."""

    client_id: str | None = None
    client_secret: str | None = None
    extra_parameters: dict[str, JsonValue] = Field(default_factory=dict)

    def get_parameter(self, name: str) -> JsonValue:
        """Return an extra parameter, or None when it is not set."""
        return self.extra_parameters.get(name)

    def add_parameter(self, name: str, value: JsonValue) -> None:
        """Set or replace a single extra parameter."""
        self.extra_parameters[name] = value

    def put_all(self, params: dict[str, JsonValue]) -> None:
        """Merge every entry of params into the extra parameters."""
        self.extra_parameters.update(params)
