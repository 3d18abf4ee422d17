"""Engine configuration management."""

# ruff: noqa: N803
# Allow uppercase argument names for config (they match environment variable names)

import logging
from typing import Any, Dict, List, Optional

from .constants import (
    DEFAULT_ALGORITHMS,
    DEFAULT_REQUIRED_PAYLOAD_CLAIMS,
    SUPPORTED_ALGORITHMS,
)

logger = logging.getLogger(__name__)


class JwtConfig:
    """Configuration for a token engine.

    Holds the algorithm allow-list and the set of payload claims every
    validated token must carry. All configuration variables follow the
    JWT_* naming convention.

    Example:
        Basic::

            from compact_jwt.config import JwtConfig
            config = JwtConfig(
                JWT_ALGORITHMS=["HS256"],
                JWT_REQUIRED_PAYLOAD_CLAIMS=["iss", "exp"],
            )
            # List all config values
            print(config.to_dict())
    """

    def __init__(
        self,
        JWT_ALGORITHMS: Optional[List[str]] = None,
        JWT_REQUIRED_PAYLOAD_CLAIMS: Optional[List[str]] = None,
    ):
        """Initialize engine configuration.

        Args:
            JWT_ALGORITHMS: Algorithms accepted in a token header
                (default: ["HS256"])
            JWT_REQUIRED_PAYLOAD_CLAIMS: Claims that must be present and truthy
                in every validated payload (default: ["iss", "sub", "aud", "exp"]).
                An empty list disables the required-claim check.
        """
        if JWT_ALGORITHMS is None:
            JWT_ALGORITHMS = DEFAULT_ALGORITHMS
        if JWT_REQUIRED_PAYLOAD_CLAIMS is None:
            JWT_REQUIRED_PAYLOAD_CLAIMS = DEFAULT_REQUIRED_PAYLOAD_CLAIMS

        # Enum members are stored by value so header matching is plain string equality
        self.JWT_ALGORITHMS = [str(getattr(a, "value", a)) for a in JWT_ALGORITHMS]
        self.JWT_REQUIRED_PAYLOAD_CLAIMS = [
            getattr(c, "value", c) for c in JWT_REQUIRED_PAYLOAD_CLAIMS
        ]

        # Validate configuration
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.JWT_ALGORITHMS:
            raise ValueError("JWT_ALGORITHMS must not be empty")

        unsupported = [a for a in self.JWT_ALGORITHMS if a not in SUPPORTED_ALGORITHMS]
        if unsupported:
            raise ValueError(
                f"JWT_ALGORITHMS contains unsupported algorithms: {unsupported}. "
                f"Supported algorithms: {sorted(SUPPORTED_ALGORITHMS)}"
            )

        for claim in self.JWT_REQUIRED_PAYLOAD_CLAIMS:
            if not isinstance(claim, str) or not claim:
                raise ValueError(
                    f"JWT_REQUIRED_PAYLOAD_CLAIMS entries must be non-empty strings, "
                    f"got {claim!r}"
                )

        if not self.JWT_REQUIRED_PAYLOAD_CLAIMS:
            logger.debug("Required payload claim check disabled")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary containing all configuration values.
        """
        return {
            "JWT_ALGORITHMS": list(self.JWT_ALGORITHMS),
            "JWT_REQUIRED_PAYLOAD_CLAIMS": list(self.JWT_REQUIRED_PAYLOAD_CLAIMS),
        }

    def __repr__(self) -> str:
        """String representation of config."""
        items = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"JwtConfig({items})"


def get_config_value(config: Optional[Any], key: str, default: Any = None) -> Any:
    """Get configuration value from config object.

    Supports both dict-like and object attribute access patterns.

    Args:
        config: Configuration object or dict.
        key: Configuration key to retrieve.
        default: Default value if key not found.

    Returns:
        Configuration value or default.
    """
    if config is None:
        return default

    # Try dict-like access first
    if isinstance(config, dict):
        return config.get(key, default)

    # Try attribute access (for objects)
    return getattr(config, key, default)
