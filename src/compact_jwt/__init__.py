"""Compact JWT - HS256 access token issuance and verification.

This package builds signed compact-serialized access tokens, validates them
against signature, algorithm allow-list, required claims and expiry, and
mints opaque refresh tokens.
"""

from .claims import HeaderClaim, PayloadClaim, create_header_claim, create_payload_claim
from .config import JwtConfig
from .constants import (
    DEFAULT_ALGORITHMS,
    DEFAULT_REQUIRED_PAYLOAD_CLAIMS,
    Algorithm,
    JwtType,
    PayloadClaimName,
)
from .engine import Jwt, JwtFactory
from .errors import (
    InvalidTokenError,
    JwtError,
    MissingAlgorithmError,
    UnsupportedAlgorithmError,
)
from .primitives import PrimitiveProvider

__all__ = [
    "DEFAULT_ALGORITHMS",
    "DEFAULT_REQUIRED_PAYLOAD_CLAIMS",
    "Algorithm",
    "HeaderClaim",
    "InvalidTokenError",
    "Jwt",
    "JwtConfig",
    "JwtError",
    "JwtFactory",
    "JwtType",
    "MissingAlgorithmError",
    "PayloadClaim",
    "PayloadClaimName",
    "PrimitiveProvider",
    "UnsupportedAlgorithmError",
    "create_header_claim",
    "create_payload_claim",
]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"
