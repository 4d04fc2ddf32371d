"""Type definitions for JWT claim inspection."""

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class JwtClaimSet(BaseModel):
    """Claims read from a compact JWT payload, signature not verified."""

    model_config = ConfigDict(frozen=True)

    claims: dict[str, JsonValue] = Field(default_factory=dict)

    def get_claim(self, name: str) -> JsonValue:
        """Return a claim value, or None when the claim is absent."""
        return self.claims.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.claims
