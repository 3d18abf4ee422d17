"""Access token validation pipeline.

Validation runs these stages in order and stops at the first failure:

1. presence: the token is a non-empty string
2. structure: the token has exactly three non-empty segments
3. signature: the signature recomputed with the caller's algorithm matches
4. header claim: ``alg`` is present and in the allow-list
5. payload claim: required claims are present and ``exp`` has not passed

Each stage returns a :class:`StageResult` instead of raising. The failure
reason is only for logging; the engine turns any failure into the same
:class:`~compact_jwt.errors.InvalidTokenError`.
"""

import hmac
import math
from functools import partial
from typing import Any, Collection, List, NamedTuple, Optional, Union

from . import timeutils
from .codec import decode_segment, join_segments, split_token
from .constants import PayloadClaimName
from .primitives import PrimitiveProvider
from .signer import sign


class StageResult(NamedTuple):
    """Outcome of a validation stage.

    ``value`` carries the stage output into the next stage on success;
    ``reason`` describes the failure otherwise.
    """

    ok: bool
    value: Any = None
    reason: Optional[str] = None


def passed(value: Any = None) -> StageResult:
    return StageResult(True, value)


def failed(reason: str) -> StageResult:
    return StageResult(False, None, reason)


def _to_number(value: Any) -> Optional[Union[int, float]]:
    """Coerce a claim value to a number, or ``None`` when it is not numeric.

    Integers are returned unchanged so arbitrarily large values compare exactly.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number):
        return None
    return number


def check_presence(access_token: Any) -> StageResult:
    if not access_token or not isinstance(access_token, str):
        return failed("access token is missing")
    return passed(access_token)


def check_structure(access_token: str) -> StageResult:
    segments = split_token(access_token)
    if segments is None:
        return failed("access token does not have three segments")
    return passed(segments)


def check_signature(
    segments: List[str],
    secret: Union[bytes, str],
    algorithm: str,
    primitives: PrimitiveProvider,
) -> StageResult:
    """Recompute the signature with the caller-supplied algorithm.

    The token's own ``alg`` header is checked separately against the
    allow-list. An unimplemented ``algorithm`` raises
    :class:`~compact_jwt.errors.UnsupportedAlgorithmError` rather than failing
    the token.
    """
    header, payload, signature = segments
    expected = sign(join_segments(header, payload), secret, algorithm, primitives)

    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        return failed("signature mismatch")
    return passed(segments)


def check_header_claim(
    segments: List[str],
    algorithms: Collection[str],
    primitives: PrimitiveProvider,
) -> StageResult:
    try:
        header = decode_segment(segments[0], primitives)
    except ValueError as e:
        return failed(f"header segment could not be decoded: {e}")

    if not isinstance(header, dict):
        return failed("header segment is not a JSON object")

    alg = header.get("alg")
    if not alg:
        return failed("header missing algorithm")

    # Exact match, no case folding
    if not isinstance(alg, str) or alg not in algorithms:
        return failed(f"header algorithm {alg!r} not in allowed algorithms")

    return passed(segments)


def check_payload_claim(
    segments: List[str],
    required_claims: Collection[str],
    primitives: PrimitiveProvider,
) -> StageResult:
    """Check required claims and expiry, returning the decoded payload.

    ``exp`` is compared with the current time truncated to whole seconds, so a
    token whose ``exp`` equals the current second is still valid. When ``exp``
    is not a required claim and is absent, no expiry check is made.
    """
    try:
        payload = decode_segment(segments[1], primitives)
    except ValueError as e:
        return failed(f"payload segment could not be decoded: {e}")

    if not isinstance(payload, dict):
        return failed("payload segment is not a JSON object")

    for claim in required_claims:
        if not payload.get(claim):
            return failed(f"payload missing required claim {claim!r}")

    if PayloadClaimName.EXP.value not in payload:
        return passed(payload)

    exp = _to_number(payload[PayloadClaimName.EXP.value])
    if exp is None:
        return failed("payload expiration is not numeric")

    now = math.floor(timeutils.current_millis() / 1000)
    if exp < now:
        return failed("access token has expired")

    return passed(payload)


def run_validation(
    access_token: Any,
    secret: Union[bytes, str],
    algorithm: str,
    algorithms: Collection[str],
    required_claims: Collection[str],
    primitives: PrimitiveProvider,
) -> StageResult:
    """Run every stage left to right, short-circuiting on the first failure.

    Returns:
        StageResult: On success ``value`` is the decoded payload dict.
    """
    stages = (
        check_structure,
        partial(
            check_signature, secret=secret, algorithm=algorithm, primitives=primitives
        ),
        partial(check_header_claim, algorithms=algorithms, primitives=primitives),
        partial(
            check_payload_claim,
            required_claims=required_claims,
            primitives=primitives,
        ),
    )

    result = check_presence(access_token)
    for stage in stages:
        if not result.ok:
            break
        result = stage(result.value)

    return result
