"""Compact serialization: ``<header>.<payload>.<signature>``."""

import json
import logging
from typing import Any, List, Mapping, Optional, Union

from .errors import MissingAlgorithmError
from .primitives import PrimitiveProvider
from .signer import sign

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "."
SEGMENT_COUNT = 3


def serialize_claim(claim: Mapping[str, Any]) -> str:
    """Serialize a claim set as tab-indented JSON in insertion order.

    The exact bytes produced here are signed, so the formatting is part of
    the token contract: ``{"alg": "HS256"}`` becomes ``'{\\n\\t"alg": "HS256"\\n}'``.
    """
    return json.dumps(claim, indent="\t", ensure_ascii=False)


def encode_segment(claim: Mapping[str, Any], primitives: PrimitiveProvider) -> str:
    """Serialize and base64url-encode one claim set."""
    return primitives.base64url_encode(serialize_claim(claim))


def decode_segment(segment: str, primitives: PrimitiveProvider) -> Any:
    """Base64url-decode one segment and parse it as JSON. No verification."""
    return primitives.base64url_decode_json(segment)


def join_segments(*segments: str) -> str:
    return SEGMENT_SEPARATOR.join(segments)


def split_token(token: str) -> Optional[List[str]]:
    """Split a compact token into its three segments.

    Returns:
        The ``[header, payload, signature]`` segments, or ``None`` when the
        token does not have exactly three non-empty segments.
    """
    segments = token.split(SEGMENT_SEPARATOR)
    if len(segments) != SEGMENT_COUNT or not all(segments):
        return None
    return segments


def create_access_token(
    header: Mapping[str, Any],
    payload: Mapping[str, Any],
    secret: Union[bytes, str],
    primitives: PrimitiveProvider,
) -> str:
    """Build a signed compact access token.

    The signature is computed with the algorithm named by ``header["alg"]``.

    Args:
        header: Header claim set; must contain a truthy ``alg``.
        payload: Payload claim set.
        secret: Shared HMAC secret.
        primitives: Primitive provider.

    Returns:
        str: ``base64url(header).base64url(payload).signature``.

    Raises:
        MissingAlgorithmError: If ``header`` has no ``alg``.
        UnsupportedAlgorithmError: If ``header["alg"]`` cannot be signed.
    """
    algorithm = header.get("alg")
    if not algorithm:
        logger.warning("Access token requested without a signing algorithm")
        raise MissingAlgorithmError()

    encoded_header = encode_segment(header, primitives)
    encoded_payload = encode_segment(payload, primitives)
    signature = sign(
        join_segments(encoded_header, encoded_payload),
        secret,
        algorithm,
        primitives,
    )

    return join_segments(encoded_header, encoded_payload, signature)
