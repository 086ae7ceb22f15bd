from ._base64url import base64url_decode, base64url_encode
from ._decoded_token import DecodedToken, decode
from ._json import parse_object, serialize

__all__ = [
    "DecodedToken",
    "base64url_decode",
    "base64url_encode",
    "decode",
    "parse_object",
    "serialize",
]
