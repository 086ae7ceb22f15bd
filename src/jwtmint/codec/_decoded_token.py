from __future__ import annotations

from dataclasses import dataclass

from jwtmint.claims import Header, Payload
from jwtmint.exceptions import FormatError

from ._base64url import base64url_decode
from ._json import parse_object


@dataclass(frozen=True)
class DecodedToken:
    """
    A parsed, not yet verified, compact token.

    Attributes:
        token (str): The token exactly as passed to `decode`.
        header_base64 (str): Header segment before base64url decoding.
        payload_base64 (str): Payload segment before base64url decoding.
        signature_base64 (str): Signature segment before base64url decoding.
        header_json (str): Decoded header JSON text.
        payload_json (str): Decoded payload JSON text.
        signature (bytes): Decoded signature bytes.
        header (Header): Parsed header claims.
        payload (Payload): Parsed payload claims.
    """

    token: str
    header_base64: str
    payload_base64: str
    signature_base64: str
    header_json: str
    payload_json: str
    signature: bytes
    header: Header
    payload: Payload

    @property
    def signing_input(self) -> bytes:
        """The bytes covered by the signature: encoded header '.' encoded payload."""
        return f"{self.header_base64}.{self.payload_base64}".encode("ascii")

    def get_algorithm(self) -> str:
        return self.header.get_algorithm()


def decode(token: str) -> DecodedToken:
    """
    Split and decode a compact token without verifying it.

    Raises FormatError unless the token has exactly three dot-separated
    segments, and DecodeError when a segment is not base64url or the header
    or payload is not a JSON object.
    """
    parts = token.split(".")
    if len(parts) < 3:
        raise FormatError("invalid token supplied")
    if len(parts) > 3:
        raise FormatError("invalid token supplied: too many segments")
    header_base64, payload_base64, signature_base64 = parts

    header_bytes = base64url_decode(header_base64)
    payload_bytes = base64url_decode(payload_base64)
    signature = base64url_decode(signature_base64)
    header_claims = parse_object(header_bytes)
    payload_claims = parse_object(payload_bytes)

    return DecodedToken(
        token=token,
        header_base64=header_base64,
        payload_base64=payload_base64,
        signature_base64=signature_base64,
        header_json=header_bytes.decode("utf-8"),
        payload_json=payload_bytes.decode("utf-8"),
        signature=signature,
        header=Header(header_claims),
        payload=Payload(payload_claims),
    )
