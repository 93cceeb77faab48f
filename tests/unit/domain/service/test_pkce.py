"""Unit tests for PKCE utilities."""

import random
import re
from base64 import urlsafe_b64decode, urlsafe_b64encode
from hashlib import sha256

from flowdeck.domain.service.pkce import (
    code_challenge_for,
    generate_code_verifier,
    generate_pkce_pair,
)


def _expected_challenge(verifier: str) -> str:
    digest = sha256(verifier.encode("utf-8")).digest()
    return urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


class TestGenerateCodeVerifier:
    """Tests for generate_code_verifier."""

    def test_length_within_pkce_bounds(self):
        """Verifier should be 43-128 characters."""
        for _ in range(20):
            verifier = generate_code_verifier()
            assert 43 <= len(verifier) <= 128

    def test_is_unpadded_base64url_of_64_bytes(self):
        verifier = generate_code_verifier()

        assert re.match(r"^[A-Za-z0-9_-]+$", verifier)
        assert len(verifier) == 86
        assert len(urlsafe_b64decode(verifier + "==")) == 64

    def test_seeded_source_is_deterministic(self):
        """Same seed should give the same verifier."""
        first = generate_code_verifier(random.Random(7).randbytes)
        second = generate_code_verifier(random.Random(7).randbytes)
        other = generate_code_verifier(random.Random(8).randbytes)

        assert first == second
        assert first != other

    def test_uses_requested_byte_count(self):
        requested = []

        def fake_bytes(n: int) -> bytes:
            requested.append(n)
            return b"\x00" * n

        verifier = generate_code_verifier(fake_bytes)

        assert requested == [64]
        assert verifier == "A" * 86


class TestCodeChallenge:
    """Tests for code_challenge_for."""

    def test_rfc7636_example(self):
        """Should match the S256 example from RFC 7636 appendix B."""
        verifier = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"

        assert (
            code_challenge_for(verifier) == "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"
        )

    def test_challenge_is_sha256_of_verifier(self):
        verifier = generate_code_verifier()

        assert code_challenge_for(verifier) == _expected_challenge(verifier)


class TestGeneratePkcePair:
    """Tests for generate_pkce_pair."""

    def test_challenge_matches_verifier(self):
        pair = generate_pkce_pair()

        assert pair.code_challenge == _expected_challenge(pair.code_verifier)
        assert "=" not in pair.code_challenge

    def test_generates_unique_pairs(self):
        first = generate_pkce_pair()
        second = generate_pkce_pair()

        assert first.code_verifier != second.code_verifier
        assert first.code_challenge != second.code_challenge
