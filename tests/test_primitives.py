"""Tests for the default primitive provider."""

import base64
import hashlib
import hmac

import pytest
from jwt.exceptions import InvalidKeyError


class TestPrimitiveProvider:
    """Test PrimitiveProvider methods."""

    def test_hmac_sha256(self, primitives):
        """Test HMAC-SHA256 matches the standard library."""
        expected = hmac.new(b"key", b"text", hashlib.sha256).digest()

        assert primitives.hmac_sha256("text", "key") == expected
        assert primitives.hmac_sha256("text", b"key") == expected

    def test_hmac_rejects_pem_key(self, primitives):
        """Test asymmetric key material cannot be used as an HMAC secret."""
        with pytest.raises(InvalidKeyError):
            primitives.hmac_sha256(
                "text", "-----BEGIN PUBLIC KEY-----\nabc\n-----END PUBLIC KEY-----\n"
            )

    def test_sha512_digest(self, primitives):
        """Test SHA-512 digests the UTF-8 text."""
        assert primitives.sha512_digest("ユーザー") == hashlib.sha512(
            "ユーザー".encode("utf-8")
        ).digest()

    def test_base64url_encode_strips_padding(self, primitives):
        """Test base64url output is URL-safe and unpadded."""
        assert primitives.base64url_encode(b"\xfb\xff") == "-_8"
        assert primitives.base64url_encode("a") == "YQ"

    def test_base64url_decode_json(self, primitives):
        """Test decoding restores padding and parses JSON."""
        assert primitives.base64url_decode_json("eyJhIjoxfQ") == {"a": 1}

    def test_base64url_decode_json_utf8(self, primitives):
        """Test decoded bytes are read as UTF-8."""
        segment = primitives.base64url_encode('{"name": "山田"}')

        assert primitives.base64url_decode_json(segment) == {"name": "山田"}

    @pytest.mark.parametrize("segment", ["bm90IGpzb24", "é", "//8"])
    def test_base64url_decode_json_invalid(self, primitives, segment):
        """Test malformed segments raise ValueError."""
        with pytest.raises(ValueError):
            primitives.base64url_decode_json(segment)

    def test_base64_encode(self, primitives):
        """Test standard base64 keeps padding."""
        assert primitives.base64_encode(b"\x01\x02\x03\x04") == base64.b64encode(
            b"\x01\x02\x03\x04"
        ).decode("ascii")
        assert primitives.base64_encode(b"\x01").endswith("==")
