"""Engine error classes following the RFC 6750 error vocabulary."""

from typing import Dict, Optional

from .constants import (
    ACCESS_TOKEN_ERROR,
    NO_SUPPORT_ALGORITHM_ERROR,
    REQUIRED_ALGORITHM_ERROR,
)


class JwtError(Exception):
    """Base exception for token creation and verification errors.

    Error codes used by the engine:
    - invalid_request (HTTP 400): Token cannot be built or signed as requested
    - invalid_token (HTTP 401): Token failed verification for any reason

    Args:
        error: Error details dict with 'error' and 'error_description' keys per RFC 6750.
        status_code: HTTP status code a host service may map the error to.
    """

    def __init__(self, error: Dict[str, str], status_code: int = 401):
        self.error = error
        self.status_code = status_code
        super().__init__(error.get("error_description", "Token error"))


class MissingAlgorithmError(JwtError):
    """Raised when a header claim has no ``alg`` at creation time."""

    def __init__(self):
        super().__init__(
            {
                "error": "invalid_request",
                "error_description": REQUIRED_ALGORITHM_ERROR,
            },
            400,
        )


class UnsupportedAlgorithmError(JwtError):
    """Raised when signing is requested for an algorithm with no implementation."""

    def __init__(self, algorithm: Optional[str] = None):
        self.algorithm = algorithm
        super().__init__(
            {
                "error": "invalid_request",
                "error_description": NO_SUPPORT_ALGORITHM_ERROR,
            },
            400,
        )


class InvalidTokenError(JwtError):
    """Raised for every verification failure.

    The description is identical for all failing checks so callers cannot
    tell which check rejected the token.
    """

    def __init__(self):
        super().__init__(
            {
                "error": "invalid_token",
                "error_description": ACCESS_TOKEN_ERROR,
            },
            401,
        )
