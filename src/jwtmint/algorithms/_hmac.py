from __future__ import annotations

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from jwtmint.exceptions import SignatureError

from ._algorithm import Algorithm


class HMACAlgorithm(Algorithm):
    """
    HMAC-SHA2 family of algorithms.

    The shared secret may be given as bytes or as a string, which is
    UTF-8 encoded.
    """

    hash_algorithm: type[hashes.HashAlgorithm]

    def __init__(self, secret: bytes | str) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._secret = secret

    def sign(self, data: bytes) -> bytes:
        mac = hmac.HMAC(self._secret, self.hash_algorithm())
        mac.update(data)
        return mac.finalize()

    def verify(self, data: bytes, signature: bytes) -> None:
        expected = self.sign(data)
        # bytes_eq covers both buffers in full and fails on length mismatch
        if not constant_time.bytes_eq(expected, bytes(signature)):
            raise SignatureError("signature verification failed")


class HS256(HMACAlgorithm):
    name = "HS256"
    hash_algorithm = hashes.SHA256


class HS384(HMACAlgorithm):
    name = "HS384"
    hash_algorithm = hashes.SHA384


class HS512(HMACAlgorithm):
    name = "HS512"
    hash_algorithm = hashes.SHA512
