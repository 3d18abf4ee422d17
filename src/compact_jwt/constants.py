"""Algorithm identifiers, claim names and defaults shared across the engine."""

from enum import Enum


class Algorithm(str, Enum):
    """Signing algorithm identifiers.

    ``UNKNOWN`` only represents "no algorithm" and is never accepted for
    signing or verification.
    """

    HS256 = "HS256"
    UNKNOWN = "UNKNOWN"


class JwtType(str, Enum):
    """Media type tags for the ``typ`` header claim."""

    JWT = "JWT"
    UNKNOWN = "UNKNOWN"


class PayloadClaimName(str, Enum):
    """Registered payload claim names (RFC 7519 section 4.1)."""

    ISS = "iss"  # issuer
    SUB = "sub"  # subject
    AUD = "aud"  # audience
    EXP = "exp"  # expiration, epoch seconds
    NBF = "nbf"  # not before, epoch seconds
    IAT = "iat"  # issued at, epoch seconds
    JTI = "jti"  # token id


# Algorithms with a signing implementation
SUPPORTED_ALGORITHMS = frozenset([Algorithm.HS256.value])

DEFAULT_ALGORITHMS = [Algorithm.HS256.value]

DEFAULT_REQUIRED_PAYLOAD_CLAIMS = [
    PayloadClaimName.ISS.value,
    PayloadClaimName.SUB.value,
    PayloadClaimName.AUD.value,
    PayloadClaimName.EXP.value,
]

ACCESS_TOKEN_ERROR = "Invalid access token"
ACCESS_TOKEN_EXPIRED_ERROR = "Access token has expired"
REQUIRED_ALGORITHM_ERROR = "Signing algorithm is required"
NO_SUPPORT_ALGORITHM_ERROR = "Unsupported signing algorithm"
