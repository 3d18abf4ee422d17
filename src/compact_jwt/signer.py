"""Signature computation over a compact-serialization signing input."""

import logging
from typing import Union

from .constants import Algorithm
from .errors import UnsupportedAlgorithmError
from .primitives import PrimitiveProvider

logger = logging.getLogger(__name__)


def sign(
    signing_input: str,
    secret: Union[bytes, str],
    algorithm: Union[Algorithm, str],
    primitives: PrimitiveProvider,
) -> str:
    """Sign ``signing_input`` and return the base64url signature segment.

    Signing is deterministic: the same input, secret and algorithm always
    produce the same signature, which is what lets verification re-derive it.

    Args:
        signing_input: ``encodedHeader + "." + encodedPayload``.
        secret: Shared HMAC secret.
        algorithm: Algorithm identifier. Only ``HS256`` is implemented.
        primitives: Primitive provider used for HMAC and base64url.

    Returns:
        str: Unpadded base64url signature.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not ``HS256``.
        jwt.exceptions.InvalidKeyError: If ``secret`` is rejected as an HMAC key
            (empty, or PEM/SSH encoded asymmetric key material). Key errors are
            not turned into token errors.
    """
    if algorithm == Algorithm.HS256.value:
        signature = primitives.hmac_sha256(signing_input, secret)
        return primitives.base64url_encode(signature)

    logger.warning(f"Signing requested with unsupported algorithm: {algorithm!r}")
    raise UnsupportedAlgorithmError(algorithm)
