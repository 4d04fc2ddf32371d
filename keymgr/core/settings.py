"""Key-manager configuration: environment settings and the parameter bag."""

from pydantic import BaseModel, Field, JsonValue
from pydantic_settings import BaseSettings, SettingsConfigDict

from keymgr.core.errors import ConfigurationError
from keymgr.core.values import optional_bool, optional_mapping, optional_str

ENABLE_TOKEN_VALIDATION = "validation_enable"
VALIDATION_TYPE = "validation_type"
VALIDATION_VALUE = "validation_value"


class KeyManagerConfiguration(BaseModel):
    """Opaque key/value parameters of one key-manager instance."""

    name: str = ""
    parameters: dict[str, JsonValue] = Field(default_factory=dict)

    def get_parameter(self, name: str) -> JsonValue:
        """Return a raw parameter, or None when it is not set."""
        return self.parameters.get(name)

    def add_parameter(self, name: str, value: JsonValue) -> None:
        """Set or replace a parameter."""
        self.parameters[name] = value

    def get_bool(self, name: str) -> bool | None:
        return optional_bool(self.get_parameter(name), name, ConfigurationError)

    def get_str(self, name: str) -> str | None:
        return optional_str(self.get_parameter(name), name, ConfigurationError)

    def get_mapping(self, name: str) -> dict[str, JsonValue] | None:
        return optional_mapping(self.get_parameter(name), name, ConfigurationError)


class KeyManagerSettings(BaseSettings):
    """Token-validation settings read from KEYMGR_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="KEYMGR_")

    name: str = "default"
    validation_enable: bool = False
    validation_type: str = ""
    validation_value: str = ""

    def to_configuration(self) -> KeyManagerConfiguration:
        """Build a parameter bag holding only the settings that are set."""
        params: dict[str, JsonValue] = {ENABLE_TOKEN_VALIDATION: self.validation_enable}
        if self.validation_type:
            params[VALIDATION_TYPE] = self.validation_type
        if self.validation_value:
            params[VALIDATION_VALUE] = self.validation_value
        return KeyManagerConfiguration(name=self.name, parameters=params)
