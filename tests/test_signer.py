"""Tests for signature computation."""

import hashlib
import hmac

import pytest
from jwt.utils import base64url_encode

from compact_jwt.constants import Algorithm
from compact_jwt.errors import UnsupportedAlgorithmError
from compact_jwt.signer import sign


class TestSign:
    """Test sign function."""

    def test_hs256_signature(self, primitives):
        """Test HS256 signature matches a plain HMAC-SHA256."""
        expected = base64url_encode(
            hmac.new(b"privateKey", b"header.payload", hashlib.sha256).digest()
        ).decode("ascii")

        assert sign("header.payload", "privateKey", "HS256", primitives) == expected

    def test_enum_algorithm(self, primitives):
        """Test the Algorithm enum is accepted."""
        assert sign("a.b", "k", Algorithm.HS256, primitives) == sign(
            "a.b", "k", "HS256", primitives
        )

    def test_deterministic(self, primitives):
        """Test the same inputs always give the same signature."""
        first = sign("a.b", "secret", "HS256", primitives)
        second = sign("a.b", "secret", "HS256", primitives)

        assert first == second
        assert "=" not in first

    def test_key_changes_signature(self, primitives):
        """Test a different key gives a different signature."""
        assert sign("a.b", "k1", "HS256", primitives) != sign(
            "a.b", "k2", "HS256", primitives
        )

    def test_uses_primitives(self, mock_primitives):
        """Test signing goes through the primitive provider."""
        mock_primitives.hmac_sha256.return_value = b"\x01\x02"
        mock_primitives.base64url_encode.return_value = "signature"

        assert sign("header.payload", "privateKey", "HS256", mock_primitives) == (
            "signature"
        )
        mock_primitives.hmac_sha256.assert_called_once_with(
            "header.payload", "privateKey"
        )
        mock_primitives.base64url_encode.assert_called_once_with(b"\x01\x02")

    def test_unknown_algorithm(self, primitives):
        """Test the UNKNOWN sentinel cannot sign."""
        with pytest.raises(UnsupportedAlgorithmError):
            sign("a.b", "k", "UNKNOWN", primitives)

    @pytest.mark.parametrize("algorithm", ["RS256", "hs256", "none", "", None])
    def test_unsupported_algorithms(self, primitives, algorithm):
        """Test anything other than exactly HS256 is rejected."""
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            sign("a.b", "k", algorithm, primitives)

        assert exc_info.value.algorithm == algorithm
