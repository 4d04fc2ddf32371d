"""Build canonical token requests from JSON text or OAuth applications."""

import logging

from keymgr.core.errors import MalformedInputError, MissingCredentialsError
from keymgr.core.values import optional_int64, optional_str, optional_str_list
from keymgr.oauth.json_record import parse_json_record
from keymgr.oauth.types import (
    APP_VALIDITY_PERIOD,
    OAUTH_CLIENT_ID,
    OAUTH_CLIENT_SECRET,
    TOKEN_SCOPE,
    VALIDITY_PERIOD,
    OAuthAppInfo,
    TokenRequest,
)

_log = logging.getLogger(__name__)


def _format_scopes(scopes: list[str]) -> str:
    """Render scopes as a bracketed, comma-separated string."""
    return "[" + ", ".join(scopes) + "]"


def token_request_from_json(
    text: str | None,
    existing: TokenRequest | None = None,
    *,
    logger: logging.Logger = _log,
) -> TokenRequest | None:
    """Copy token-request fields from a JSON object into a request.

    Empty text returns the request unchanged (a fresh one if none was given).
    A JSON ``null`` or ``{}`` yields None: no request could be derived.
    """
    if existing is None:
        logger.debug("Input request is null. Creating a new Request Object.")
        existing = TokenRequest()

    if not text:
        logger.debug("JsonInput is null or Empty.")
        return existing

    try:
        params = parse_json_record(text)
    except MalformedInputError:
        logger.exception("Error occurred while parsing JSON String")
        raise

    if not params:
        return None

    # All fields are read before the request is mutated.
    client_id = optional_str(params.get(OAUTH_CLIENT_ID), OAUTH_CLIENT_ID)
    client_secret = optional_str(params.get(OAUTH_CLIENT_SECRET), OAUTH_CLIENT_SECRET)
    validity = optional_int64(params.get(VALIDITY_PERIOD), VALIDITY_PERIOD)

    if client_id is not None:
        existing.client_id = client_id
    if client_secret is not None:
        existing.client_secret = client_secret
    if validity is not None:
        existing.validity_period = validity

    return existing


def token_request_from_app_info(
    app_info: OAuthAppInfo | None,
    existing: TokenRequest | None = None,
) -> TokenRequest | None:
    """Fill a token request from an OAuth application's credentials.

    A ``tokenScope`` list becomes the request scopes and, as a side effect,
    is rewritten in app_info to its bracketed string form.
    """
    if app_info is None:
        return existing
    if existing is None:
        existing = TokenRequest()

    if app_info.client_id is None or app_info.client_secret is None:
        raise MissingCredentialsError()

    scopes = optional_str_list(app_info.get_parameter(TOKEN_SCOPE), TOKEN_SCOPE)
    validity = optional_int64(
        app_info.get_parameter(APP_VALIDITY_PERIOD), APP_VALIDITY_PERIOD
    )

    existing.client_id = app_info.client_id
    existing.client_secret = app_info.client_secret
    if scopes is not None:
        existing.scopes = scopes
        app_info.add_parameter(TOKEN_SCOPE, _format_scopes(scopes))
    if validity is not None:
        existing.validity_period = validity

    return existing
