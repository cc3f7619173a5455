"""Base64url encoding utilities for exporting pqkit key material as text."""

from __future__ import annotations

import base64
import binascii
import re

from ..errors import EncodingError

# Base64url alphabet without padding
_BASE64URL_PATTERN = re.compile(r"^[A-Za-z0-9_-]*$")


def to_base64url(data: bytes) -> str:
    """Encode bytes to URL-safe base64 without padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string without padding.
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def from_base64url(s: str) -> bytes:
    """Decode an unpadded URL-safe base64 string to bytes.

    Args:
        s: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        EncodingError: If the string contains characters outside the
            base64url alphabet or has an impossible length.
    """
    if not _BASE64URL_PATTERN.match(s):
        raise EncodingError("Base64URL string contains non-Base64URL characters")
    padding = 4 - (len(s) % 4)
    if padding != 4:
        s += "=" * padding
    try:
        return base64.urlsafe_b64decode(s)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid Base64URL string: {e}") from e
