"""Shared test fixtures for keymgr."""

from typing import Any

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from token_signing import TokenSigner

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
TEST_KID = "test-signing-key"


@pytest.fixture(scope="session")
def private_key_pem() -> str:
    """Generate a throwaway RSA key for signing test tokens."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def sign_token(private_key_pem: str) -> TokenSigner:
    """Return a helper that signs a claim dict as an RS256 JWT."""

    def _sign(claims: dict[str, Any]) -> str:
        return jwt.encode(
            claims,
            private_key_pem,
            algorithm="RS256",
            headers={"kid": TEST_KID},
        )

    return _sign

