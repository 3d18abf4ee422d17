"""Cryptographic and encoding primitives consumed by the token engine.

The engine never touches ``hmac``/``base64`` directly; it goes through a
:class:`PrimitiveProvider` so the primitives can be swapped or mocked. The
default provider reuses PyJWT's base64url helpers and HMAC implementation.
"""

import base64
import hashlib
import json
from typing import Any, Union

from jwt.algorithms import HMACAlgorithm
from jwt.utils import base64url_decode, base64url_encode


def _to_bytes(data: Union[bytes, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class PrimitiveProvider:
    """HMAC-SHA256, SHA-512 and base64 primitives backed by PyJWT and hashlib."""

    def __init__(self):
        self._hmac_sha256 = HMACAlgorithm(HMACAlgorithm.SHA256)

    def hmac_sha256(self, text: str, key: Union[bytes, str]) -> bytes:
        """Compute a raw HMAC-SHA256 over ``text`` keyed with ``key``.

        Raises:
            jwt.exceptions.InvalidKeyError: If the key is empty or looks like an
                asymmetric key (PEM or SSH encoded), which must never be used as an
                HMAC secret.
        """
        prepared = self._hmac_sha256.prepare_key(key)
        return self._hmac_sha256.sign(_to_bytes(text), prepared)

    def sha512_digest(self, text: str) -> bytes:
        """Compute the SHA-512 digest of the UTF-8 encoding of ``text``."""
        return hashlib.sha512(_to_bytes(text)).digest()

    def base64url_encode(self, data: Union[bytes, str]) -> str:
        """URL-safe base64 encode without ``=`` padding."""
        return base64url_encode(_to_bytes(data)).decode("ascii")

    def base64url_decode_json(self, data: str) -> Any:
        """URL-safe base64 decode ``data`` and parse the result as JSON text.

        Raises:
            ValueError: If ``data`` is not valid base64url or does not decode
                to UTF-8 JSON (``binascii.Error``, ``UnicodeDecodeError`` and
                ``json.JSONDecodeError`` are all ``ValueError`` subclasses).
        """
        decoded = base64url_decode(data)
        return json.loads(decoded.decode("utf-8"))

    def base64_encode(self, data: bytes) -> str:
        """Standard (padded) base64 encode."""
        return base64.b64encode(data).decode("ascii")
