from __future__ import annotations

from jwtmint.exceptions import SignatureError

from ._algorithm import Algorithm


class NoneAlgorithm(Algorithm):
    """Unsecured JWS: empty signature on sign, only empty signatures verify."""

    name = "none"

    def sign(self, data: bytes) -> bytes:
        return b""

    def verify(self, data: bytes, signature: bytes) -> None:
        if signature:
            raise SignatureError("signature verification failed")
