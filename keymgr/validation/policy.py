"""Decide whether a key manager should validate a given access token."""

import logging
import re

from keymgr.core.values import to_text
from keymgr.crypto.jwt_claims import looks_like_jwt, read_claims
from keymgr.validation.types import (
    VALIDATION_ENTRY_JWT_BODY,
    ValidationConfig,
    ValidationMode,
)

_log = logging.getLogger(__name__)


def can_handle(
    token: str,
    config: ValidationConfig,
    *,
    logger: logging.Logger = _log,
) -> bool:
    """Return True when this key manager should attempt to validate token.

    With validation disabled every token is accepted. In regex mode the
    pattern is searched anywhere in the token. In JWT mode the claim rules of
    the ``body`` section are tried in order: a missing claim rejects the token
    and the first matching rule accepts it.

    Raises ClaimsParseError when a dotted token cannot be parsed as a JWT.
    """
    if not config.enable_token_validation:
        return True

    if config.mode is ValidationMode.REGEX:
        if config.pattern:
            matched = re.search(config.pattern, token) is not None
            logger.debug("Regex token check matched=%s", matched)
            return matched
    elif config.mode is ValidationMode.JWT_CLAIMS and looks_like_jwt(token):
        claims = read_claims(token)
        for section, rules in config.claim_rules.items():
            if section != VALIDATION_ENTRY_JWT_BODY:
                continue
            for claim_name, pattern in rules.items():
                value = claims.get_claim(claim_name)
                if value is None:
                    logger.debug("Token lacks claim %r", claim_name)
                    return False
                if re.search(pattern, to_text(value)):
                    logger.debug("Token claim %r matched", claim_name)
                    return True
    return False
