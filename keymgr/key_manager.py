"""Shared token-handling behaviour for key-manager backends."""

import logging

from keymgr.core.settings import KeyManagerConfiguration
from keymgr.oauth.app_info import app_info_from_json
from keymgr.oauth.token_request import (
    token_request_from_app_info,
    token_request_from_json,
)
from keymgr.oauth.types import OAuthAppInfo, TokenRequest
from keymgr.validation.policy import can_handle
from keymgr.validation.types import ValidationConfig


class KeyManager:
    """Base class for key-manager backends.

    Holds the backend's configuration and the validation rules derived from
    it. Backends subclass this and add their own network operations.
    """

    def __init__(
        self,
        configuration: KeyManagerConfiguration,
        logger: logging.Logger | None = None,
    ) -> None:
        self._configuration = configuration
        self._validation = ValidationConfig.from_configuration(configuration)
        self._log = logger or logging.getLogger(__name__)

    @property
    def configuration(self) -> KeyManagerConfiguration:
        return self._configuration

    @property
    def validation(self) -> ValidationConfig:
        return self._validation

    def build_access_token_request_from_json(
        self, json_input: str | None, token_request: TokenRequest | None = None
    ) -> TokenRequest | None:
        """Merge token-request fields from JSON text into a request."""
        return token_request_from_json(json_input, token_request, logger=self._log)

    def build_from_json(
        self, app_info: OAuthAppInfo, json_input: str | None
    ) -> OAuthAppInfo | None:
        """Merge OAuth application properties from JSON text into app_info."""
        return app_info_from_json(app_info, json_input, logger=self._log)

    def build_access_token_request_from_oauth_app(
        self,
        app_info: OAuthAppInfo | None,
        token_request: TokenRequest | None = None,
    ) -> TokenRequest | None:
        """Fill a token request from an OAuth application's credentials."""
        return token_request_from_app_info(app_info, token_request)

    def can_handle_token(self, access_token: str) -> bool:
        """Return True when this backend should validate access_token."""
        return can_handle(access_token, self._validation, logger=self._log)
