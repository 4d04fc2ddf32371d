"""Tests for building validation configuration."""

import pytest
from pydantic import ValidationError

from keymgr.core.errors import ConfigurationError
from keymgr.core.settings import (
    ENABLE_TOKEN_VALIDATION,
    VALIDATION_TYPE,
    VALIDATION_VALUE,
    KeyManagerConfiguration,
)
from keymgr.validation.types import ValidationConfig, ValidationMode


def _bag(**params: object) -> KeyManagerConfiguration:
    return KeyManagerConfiguration(parameters=params)  # type: ignore[arg-type]


class TestFromConfiguration:
    """Tests for ValidationConfig.from_configuration."""

    def test_empty_bag_is_disabled(self) -> None:
        config = ValidationConfig.from_configuration(KeyManagerConfiguration())
        assert config.enable_token_validation is None
        assert config.mode is ValidationMode.DISABLED

    def test_regex_mode(self) -> None:
        config = ValidationConfig.from_configuration(
            _bag(
                **{
                    ENABLE_TOKEN_VALIDATION: True,
                    VALIDATION_TYPE: "regex",
                    VALIDATION_VALUE: "^ey",
                }
            )
        )
        assert config.mode is ValidationMode.REGEX
        assert config.pattern == "^ey"
        assert config.claim_rules == {}

    def test_jwt_mode_from_mapping(self) -> None:
        rules = {"body": {"iss": "https://idp"}}
        config = ValidationConfig.from_configuration(
            _bag(
                **{
                    ENABLE_TOKEN_VALIDATION: True,
                    VALIDATION_TYPE: "jwt",
                    VALIDATION_VALUE: rules,
                }
            )
        )
        assert config.mode is ValidationMode.JWT_CLAIMS
        assert config.claim_rules == rules
        assert config.pattern is None

    def test_jwt_mode_from_json_text(self) -> None:
        config = ValidationConfig.from_configuration(
            _bag(
                **{
                    ENABLE_TOKEN_VALIDATION: "true",
                    VALIDATION_TYPE: "jwt",
                    VALIDATION_VALUE: '{"body": {"scope": "read.*"}}',
                }
            )
        )
        assert config.enable_token_validation is True
        assert config.claim_rules == {"body": {"scope": "read.*"}}

    def test_unknown_type_maps_to_disabled(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        config = ValidationConfig.from_configuration(
            _bag(**{ENABLE_TOKEN_VALIDATION: True, VALIDATION_TYPE: "script"})
        )
        assert config.mode is ValidationMode.DISABLED
        assert "script" in caplog.text

    def test_invalid_regex(self) -> None:
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_configuration(
                _bag(
                    **{
                        ENABLE_TOKEN_VALIDATION: True,
                        VALIDATION_TYPE: "regex",
                        VALIDATION_VALUE: "(unclosed",
                    }
                )
            )

    def test_invalid_claim_regex(self) -> None:
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_configuration(
                _bag(
                    **{
                        ENABLE_TOKEN_VALIDATION: True,
                        VALIDATION_TYPE: "jwt",
                        VALIDATION_VALUE: {"body": {"scope": "[a-"}},
                    }
                )
            )

    @pytest.mark.parametrize(
        "value",
        ["{broken", ["body"], {"body": "scope"}, {"body": {"scope": 1}}],
    )
    def test_malformed_claim_rules(self, value: object) -> None:
        with pytest.raises(ConfigurationError):
            ValidationConfig.from_configuration(
                _bag(
                    **{
                        ENABLE_TOKEN_VALIDATION: True,
                        VALIDATION_TYPE: "jwt",
                        VALIDATION_VALUE: value,
                    }
                )
            )


class TestValidationConfig:
    """Tests for the config model itself."""

    def test_is_frozen(self) -> None:
        config = ValidationConfig(enable_token_validation=True)
        with pytest.raises(ValidationError):
            config.mode = ValidationMode.REGEX  # type: ignore[misc]

    def test_rejects_bad_pattern_directly(self) -> None:
        with pytest.raises(ValidationError):
            ValidationConfig(mode=ValidationMode.REGEX, pattern="*")
