"""Header and payload claim construction.

Claims are ordered mappings: the JSON serialization of a claim set feeds the
signature, so key insertion order is part of the signing contract and is
preserved end to end.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from . import timeutils
from .constants import Algorithm, JwtType, PayloadClaimName

logger = logging.getLogger(__name__)

RESERVED_PAYLOAD_CLAIMS = frozenset(c.value for c in PayloadClaimName)


def _plain(value: Any) -> Any:
    """Unwrap enum members so claim sets only hold JSON-native values."""
    if isinstance(value, (Algorithm, JwtType)):
        return value.value
    return value


class HeaderClaim(dict):
    """JOSE header claim set.

    ``alg`` is mandatory for signing; ``typ`` is optional. Any other keys are
    passed through verbatim.
    """

    @property
    def alg(self) -> Optional[str]:
        return self.get("alg")

    @property
    def typ(self) -> Optional[str]:
        return self.get("typ")


class PayloadClaim(dict):
    """JWT payload claim set with typed accessors for the registered claims."""

    @property
    def iss(self) -> Optional[str]:
        return self.get(PayloadClaimName.ISS.value)

    @property
    def sub(self) -> Optional[str]:
        return self.get(PayloadClaimName.SUB.value)

    @property
    def aud(self) -> Optional[Union[str, list]]:
        return self.get(PayloadClaimName.AUD.value)

    @property
    def exp(self) -> Optional[int]:
        return self.get(PayloadClaimName.EXP.value)

    @property
    def iat(self) -> Optional[int]:
        return self.get(PayloadClaimName.IAT.value)

    @property
    def nbf(self) -> Optional[int]:
        return self.get(PayloadClaimName.NBF.value)

    @property
    def jti(self) -> Optional[str]:
        return self.get(PayloadClaimName.JTI.value)

    @property
    def private_claims(self) -> Dict[str, Any]:
        """Claims outside the registered set, in insertion order."""
        return {k: v for k, v in self.items() if k not in RESERVED_PAYLOAD_CLAIMS}


def create_header_claim(
    algorithm: Union[Algorithm, str],
    jwt_type: Union[JwtType, str] = JwtType.UNKNOWN,
) -> HeaderClaim:
    """Create a header claim set.

    The algorithm is not checked here; an unsupported value is rejected when
    the token is signed.

    Args:
        algorithm: Signing algorithm identifier.
        jwt_type: Media type for ``typ``. ``JwtType.UNKNOWN`` omits the key.

    Returns:
        HeaderClaim: ``{"alg": algorithm}`` or ``{"alg": algorithm, "typ": jwt_type}``.

    Example:
        Basic::

            create_header_claim("HS256")         # {"alg": "HS256"}
            create_header_claim("HS256", "JWT")  # {"alg": "HS256", "typ": "JWT"}
    """
    if _plain(jwt_type) == JwtType.UNKNOWN.value:
        return HeaderClaim(alg=_plain(algorithm))

    return HeaderClaim(alg=_plain(algorithm), typ=_plain(jwt_type))


def create_payload_claim(
    iss: str,
    sub: str,
    aud: str,
    expire_minutes: int,
    private_claim: Optional[Mapping[str, Any]] = None,
) -> PayloadClaim:
    """Create a payload claim set with generated ``exp`` and ``iat``.

    Both timestamps come from a single clock reading, so
    ``exp - iat == expire_minutes * 60`` up to rounding.

    Private claims are merged after the registered ones and win on a name
    clash: passing ``{"exp": 999}`` yields a payload with ``exp == 999``.

    Args:
        iss: Issuer.
        sub: Subject.
        aud: Audience.
        expire_minutes: Lifetime of the token in minutes.
        private_claim: Optional extra claims.

    Returns:
        PayloadClaim: ``{iss, sub, aud, exp, iat, **private_claim}``.
    """
    now = timeutils.current_millis()
    exp = timeutils.epoch_seconds(now + expire_minutes * 60000)
    iat = timeutils.epoch_seconds(now)

    payload = PayloadClaim(iss=iss, sub=sub, aud=aud, exp=exp, iat=iat)

    if private_claim:
        overridden = [k for k in private_claim if k in payload]
        if overridden:
            logger.debug(f"Private claims override generated claims: {overridden}")
        payload.update(private_claim)

    return payload
