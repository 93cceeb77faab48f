"""PKCE (Proof Key for Code Exchange) utilities for OAuth security."""

import secrets
from base64 import urlsafe_b64encode
from collections.abc import Callable
from hashlib import sha256

from flowdeck.domain.value import PKCEPair

# 64 bytes encode to 86 base64url characters, inside the 43-128 range
VERIFIER_BYTES = 64


def _b64url(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_code_verifier(
    random_bytes: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    """Generate a PKCE code verifier.

    Args:
        random_bytes: Source of randomness. Production code keeps the
            default; tests may pass a seeded generator such as
            ``random.Random(seed).randbytes``.

    Returns:
        Unpadded base64url string of 64 random bytes
    """
    return _b64url(random_bytes(VERIFIER_BYTES))


def code_challenge_for(code_verifier: str) -> str:
    """Derive the S256 challenge for a verifier.

    Args:
        code_verifier: PKCE verifier

    Returns:
        Unpadded base64url SHA-256 digest of the verifier's UTF-8 bytes
    """
    return _b64url(sha256(code_verifier.encode("utf-8")).digest())


def generate_pkce_pair(
    random_bytes: Callable[[int], bytes] = secrets.token_bytes,
) -> PKCEPair:
    """Generate PKCE verifier and challenge for OAuth authorization.

    The challenge is sent in the authorization URL, the verifier is kept
    server-side and sent only to the token endpoint.

    Example:
        >>> pair = generate_pkce_pair()
        >>> pair.code_challenge == code_challenge_for(pair.code_verifier)
        True
    """
    verifier = generate_code_verifier(random_bytes)
    return PKCEPair(code_verifier=verifier, code_challenge=code_challenge_for(verifier))
