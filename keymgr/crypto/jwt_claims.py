"""Read claims from compact-serialized JWTs without verifying them."""

import jwt
from jwt.types import Options

from keymgr.core.errors import ClaimsParseError
from keymgr.crypto.types import JwtClaimSet

UNSECURED_ALG = "none"


def looks_like_jwt(token: str) -> bool:
    """Cheap check for the dot separators of a compact serialization."""
    return "." in token


def read_claims(token: str) -> JwtClaimSet:
    """Parse a compact JWT and return its payload claims.

    Only the structure is checked: the header must name a signing algorithm,
    so unsecured ``alg: none`` tokens are rejected. Signature, expiry and
    audience are left to the remote validation that runs after the policy
    decision.
    """
    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as exc:
        raise ClaimsParseError() from exc
    alg = header.get("alg")
    if not isinstance(alg, str) or alg.lower() in ("", UNSECURED_ALG):
        raise ClaimsParseError("JWT is not signed")

    opts: Options = {
        "verify_signature": False,
        "verify_exp": False,
        "verify_nbf": False,
        "verify_iat": False,
        "verify_aud": False,
        "verify_iss": False,
        "verify_sub": False,
        "verify_jti": False,
    }
    try:
        raw = jwt.decode(token, options=opts)
    except jwt.InvalidTokenError as exc:
        raise ClaimsParseError() from exc
    return JwtClaimSet(claims=raw)
