"""Opaque refresh token generation.

Refresh tokens carry no claims and are not signed; their expiry is tracked
by the caller as a separate epoch timestamp.
"""

import random

from . import timeutils
from .primitives import PrimitiveProvider

# OS entropy source; the salt is still a float, so the token is only as
# unpredictable as 53 random bits plus the user-specific value.
_random = random.SystemRandom()


def create_refresh_token(
    user_specific_value: str, primitives: PrimitiveProvider
) -> str:
    """Create an opaque refresh token.

    The token is ``base64(sha512(user_specific_value + str(random_float)))``.

    Args:
        user_specific_value: Value tied to the user, e.g. an email address.
        primitives: Primitive provider used for the digest and base64.

    Returns:
        str: Padded standard base64 string.
    """
    salted = f"{user_specific_value}{_random.random()}"
    return primitives.base64_encode(primitives.sha512_digest(salted))


def create_refresh_token_expiry_timestamp(effective_days: int) -> int:
    """Return epoch seconds ``effective_days`` calendar days from now."""
    return timeutils.add_days(timeutils.current_millis(), effective_days)
