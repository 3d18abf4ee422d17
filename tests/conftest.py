"""Pytest fixtures for compact-jwt tests."""

import time
from unittest.mock import MagicMock, patch

import pytest

from compact_jwt.codec import encode_segment, join_segments
from compact_jwt.engine import Jwt
from compact_jwt.primitives import PrimitiveProvider
from compact_jwt.signer import sign

# 2022-11-05 16:02:03 UTC
FIXED_NOW = 1667577723


@pytest.fixture
def secret():
    """Shared HMAC secret long enough for HS256."""
    return "a-string-secret-at-least-256-bits-long"


@pytest.fixture
def primitives():
    """Real primitive provider."""
    return PrimitiveProvider()


@pytest.fixture
def mock_primitives():
    """Primitive provider mock for call-level assertions."""
    return MagicMock(spec=PrimitiveProvider)


@pytest.fixture
def jwt_engine():
    """Engine with the default configuration."""
    return Jwt()


@pytest.fixture
def fixed_now():
    """Frozen clock value in epoch seconds."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Freeze the engine clock at FIXED_NOW (whole seconds)."""
    with patch(
        "compact_jwt.timeutils.current_millis", return_value=FIXED_NOW * 1000
    ) as mock_clock:
        yield mock_clock


@pytest.fixture
def valid_payload():
    """Payload satisfying the default required claims."""
    now = int(time.time())
    return {
        "iss": "https://auth.example.com",
        "sub": "test-user",
        "aud": "test-audience",
        "exp": now + 3600,
        "iat": now,
    }


@pytest.fixture
def make_token(secret, primitives):
    """Build an HS256-signed token from arbitrary header and payload dicts.

    Unlike ``create_access_token`` the signature is always HS256, whatever the
    header says, so tests can craft tokens with foreign ``alg`` values.
    """

    def _make(header, payload, key=secret):
        encoded_header = encode_segment(header, primitives)
        encoded_payload = encode_segment(payload, primitives)
        signing_input = join_segments(encoded_header, encoded_payload)
        signature = sign(signing_input, key, "HS256", primitives)
        return join_segments(encoded_header, encoded_payload, signature)

    return _make
