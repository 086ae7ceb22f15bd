from __future__ import annotations

import base64
import binascii
import re

from jwtmint.exceptions import DecodeError

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*={0,3}")


def base64url_encode(data: bytes) -> str:
    """Encode with the URL-safe alphabet and strip the '=' fill."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def base64url_decode(segment: str) -> bytes:
    """
    Decode a base64url segment, re-adding any stripped '=' fill first.

    Characters outside the URL-safe alphabet raise DecodeError, as does a
    segment whose length leaves a single dangling character or whose last
    character carries non-zero unused bits.
    """
    padded = segment
    remainder = len(padded) % 4
    if remainder:
        padded += "=" * (4 - remainder)
    if not _BASE64URL.fullmatch(padded):
        raise DecodeError("invalid base64url encoding")
    try:
        data = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as error:
        raise DecodeError("invalid base64url encoding") from error
    # only the canonical encoding of `data` is accepted
    if base64url_encode(data) != segment.rstrip("="):
        raise DecodeError("invalid base64url encoding: non-canonical")
    return data
