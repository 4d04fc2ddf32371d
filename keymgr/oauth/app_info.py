"""Merge JSON payloads into OAuth application records."""

import logging

from keymgr.core.errors import MalformedInputError
from keymgr.core.values import optional_str
from keymgr.oauth.json_record import parse_json_record
from keymgr.oauth.types import OAUTH_CLIENT_ID, OAUTH_CLIENT_SECRET, OAuthAppInfo

_log = logging.getLogger(__name__)


def app_info_from_json(
    app_info: OAuthAppInfo,
    text: str | None,
    *,
    logger: logging.Logger = _log,
) -> OAuthAppInfo | None:
    """Copy credentials and every JSON key into app_info, in place.

    Returns the same app_info instance; empty text leaves it untouched and a
    JSON ``null`` yields None.
    """
    if not text:
        logger.debug("JsonInput is null or Empty.")
        return app_info

    try:
        params = parse_json_record(text)
    except MalformedInputError:
        logger.exception("Error occurred while parsing JSON String")
        raise

    if params is None:
        return None

    client_id = optional_str(params.get(OAUTH_CLIENT_ID), OAUTH_CLIENT_ID)
    client_secret = optional_str(params.get(OAUTH_CLIENT_SECRET), OAUTH_CLIENT_SECRET)
    if client_id is not None:
        app_info.client_id = client_id
    if client_secret is not None:
        app_info.client_secret = client_secret

    app_info.put_all(params)
    return app_info
