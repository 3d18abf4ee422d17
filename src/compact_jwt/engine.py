"""Token engine: creation, signing and validation bound to one configuration."""

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from box import Box

from . import refresh, timeutils
from .claims import HeaderClaim, PayloadClaim, create_header_claim, create_payload_claim
from .codec import create_access_token, decode_segment
from .config import JwtConfig, get_config_value
from .constants import Algorithm, JwtType
from .errors import InvalidTokenError
from .primitives import PrimitiveProvider
from .signer import sign
from .validator import run_validation

logger = logging.getLogger(__name__)


class Jwt:
    """HS256 access token engine.

    The algorithm allow-list and required payload claims are fixed when the
    engine is built. Reconfiguring returns a new engine, so an instance can
    be shared between threads without locking.

    Example:
        Basic::

            jwt = JwtFactory.create()
            header = jwt.create_header_claim(Algorithm.HS256, JwtType.JWT)
            payload = jwt.create_payload_claim("issuer", "user-1", "my-api", 30)
            token = jwt.create_access_token(header, payload, secret)

            claims = jwt.validate(secret, "HS256", token)
            claims.sub  # 'user-1'
    """

    def __init__(
        self,
        config: Optional[Any] = None,
        primitives: Optional[PrimitiveProvider] = None,
    ):
        """Initialize the engine.

        Args:
            config: ``JwtConfig``, dict or object exposing ``JWT_ALGORITHMS``
                and ``JWT_REQUIRED_PAYLOAD_CLAIMS``. Missing keys use defaults.
            primitives: Primitive provider (default: ``PrimitiveProvider()``).
        """
        if not isinstance(config, JwtConfig):
            config = JwtConfig(
                JWT_ALGORITHMS=get_config_value(config, "JWT_ALGORITHMS"),
                JWT_REQUIRED_PAYLOAD_CLAIMS=get_config_value(
                    config, "JWT_REQUIRED_PAYLOAD_CLAIMS"
                ),
            )

        self._config = config
        self._algorithms: Tuple[str, ...] = tuple(config.JWT_ALGORITHMS)
        self._required_payload_claims: Tuple[str, ...] = tuple(
            config.JWT_REQUIRED_PAYLOAD_CLAIMS
        )
        self._primitives = primitives or PrimitiveProvider()

    @property
    def config(self) -> JwtConfig:
        return self._config

    @property
    def algorithms(self) -> Tuple[str, ...]:
        return self._algorithms

    @property
    def required_payload_claims(self) -> Tuple[str, ...]:
        return self._required_payload_claims

    @property
    def primitives(self) -> PrimitiveProvider:
        return self._primitives

    def get_required_payload_claims(self) -> List[str]:
        return list(self._required_payload_claims)

    def set_required_payload_claims(self, required_payload_claims: List[str]) -> "Jwt":
        """Return a new engine with a different required claim set.

        The receiver is not modified. An empty list disables the
        required-claim check.

        Args:
            required_payload_claims: Claim names every validated payload must carry.

        Returns:
            Jwt: New engine sharing this engine's allow-list and primitives.
        """
        config = JwtConfig(
            JWT_ALGORITHMS=list(self._algorithms),
            JWT_REQUIRED_PAYLOAD_CLAIMS=list(required_payload_claims),
        )
        return Jwt(config, self._primitives)

    def create_header_claim(
        self,
        algorithm: Union[Algorithm, str],
        jwt_type: Union[JwtType, str] = JwtType.UNKNOWN,
    ) -> HeaderClaim:
        return create_header_claim(algorithm, jwt_type)

    def create_payload_claim(
        self,
        iss: str,
        sub: str,
        aud: str,
        expire_minutes: int,
        private_claim: Optional[Mapping[str, Any]] = None,
    ) -> PayloadClaim:
        return create_payload_claim(iss, sub, aud, expire_minutes, private_claim)

    def sign(
        self,
        signing_input: str,
        secret: Union[bytes, str],
        algorithm: Union[Algorithm, str],
    ) -> str:
        """Sign ``signing_input``; see :func:`compact_jwt.signer.sign`.

        Raises:
            UnsupportedAlgorithmError: If ``algorithm`` is not ``HS256``.
            jwt.exceptions.InvalidKeyError: If ``secret`` is rejected as an HMAC key.
        """
        return sign(signing_input, secret, algorithm, self._primitives)

    def create_access_token(
        self,
        header: Mapping[str, Any],
        payload: Mapping[str, Any],
        secret: Union[bytes, str],
    ) -> str:
        return create_access_token(header, payload, secret, self._primitives)

    def validate(
        self,
        secret: Union[bytes, str],
        algorithm: Union[Algorithm, str],
        access_token: Optional[str],
    ) -> Box:
        """Validate an access token.

        The signature is recomputed with ``algorithm`` as supplied by the
        caller; the token's own ``alg`` header must separately appear in the
        engine's allow-list.

        Args:
            secret: Shared HMAC secret.
            algorithm: Algorithm the caller trusts for this secret.
            access_token: Compact token string.

        Returns:
            Box: Immutable (frozen) Box containing the validated payload.

        Raises:
            InvalidTokenError: If any check fails. The error does not say which.
            UnsupportedAlgorithmError: If ``algorithm`` cannot be used for signing.
            jwt.exceptions.InvalidKeyError: If ``secret`` is rejected as an HMAC key
                (empty, or PEM/SSH encoded asymmetric key material).
        """
        result = run_validation(
            access_token,
            secret,
            algorithm,
            self._algorithms,
            self._required_payload_claims,
            self._primitives,
        )

        if not result.ok:
            logger.warning(f"Token validation failed: {result.reason}")
            raise InvalidTokenError()

        return Box(result.value, frozen_box=True)

    def decode(self, segment: str) -> Any:
        """Decode a single token segment without verifying anything."""
        return decode_segment(segment, self._primitives)

    def create_refresh_token(self, user_specific_value: str) -> str:
        return refresh.create_refresh_token(user_specific_value, self._primitives)

    def create_refresh_token_expiry_timestamp(self, effective_days: int) -> int:
        return refresh.create_refresh_token_expiry_timestamp(effective_days)

    def timestamp_to_datetime(self, timestamp: float) -> str:
        return timeutils.timestamp_to_datetime(timestamp)

    def __repr__(self) -> str:
        return (
            f"Jwt(algorithms={list(self._algorithms)!r}, "
            f"required_payload_claims={list(self._required_payload_claims)!r})"
        )


class JwtFactory:
    """Builds engines with the default configuration."""

    @staticmethod
    def create(config: Optional[Any] = None) -> Jwt:
        """Create an engine with the default primitive provider.

        Args:
            config: Optional configuration; defaults apply when omitted.

        Returns:
            Jwt: New engine.
        """
        return Jwt(config, PrimitiveProvider())
