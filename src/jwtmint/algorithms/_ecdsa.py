from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
    encode_dss_signature,
)

from jwtmint.exceptions import SignatureError

from ._algorithm import Algorithm


class ECDSAAlgorithm(Algorithm):
    """
    ECDSA-SHA2 family of algorithms with JOSE raw signatures.

    Signatures are the r and s integers written as fixed-width big-endian
    numbers of the curve order size and concatenated (IEEE P1363), not the
    ASN.1 DER structure produced by the underlying primitive.

    A private key is needed to sign; a public key alone is enough to verify.
    When only the private key is given its public key is derived. Nonces are
    drawn from the crypto backend's CSPRNG on every call, so two signatures
    of the same data differ.

    Example:
    ```
        private_key = ec.generate_private_key(ec.SECP256R1())
        signer = ES256(private_key=private_key)
        checker = ES256(public_key=private_key.public_key())
    ```
    """

    hash_algorithm: type[hashes.HashAlgorithm]
    curve: type[ec.EllipticCurve]

    def __init__(
        self,
        private_key: ec.EllipticCurvePrivateKey | None = None,
        public_key: ec.EllipticCurvePublicKey | None = None,
    ) -> None:
        if private_key is None and public_key is None:
            raise ValueError(f"{self.name} needs a private key or a public key")
        if public_key is None and private_key is not None:
            public_key = private_key.public_key()

        for key in (private_key, public_key):
            if key is not None and not isinstance(key.curve, self.curve):
                raise ValueError(
                    f"{self.name} requires a {self.curve.name} key, "
                    f"got {key.curve.name}"
                )

        self._private_key = private_key
        self._public_key = public_key
        self._coordinate_size = (self.curve.key_size + 7) // 8

    def _digest(self, data: bytes) -> bytes:
        digest = hashes.Hash(self.hash_algorithm())
        digest.update(data)
        return digest.finalize()

    def _signature_algorithm(self) -> ec.ECDSA:
        return ec.ECDSA(Prehashed(self.hash_algorithm()))

    def sign(self, data: bytes) -> bytes:
        if self._private_key is None:
            raise SignatureError(f"{self.name} signing requires a private key")
        try:
            der_signature = self._private_key.sign(
                self._digest(data), self._signature_algorithm()
            )
        except ValueError as error:
            raise SignatureError("signature generation failed") from error

        r, s = decode_dss_signature(der_signature)
        size = self._coordinate_size
        signature = r.to_bytes(size, "big") + s.to_bytes(size, "big")
        if len(signature) % 2 == 1 and signature[0] == 0:
            return signature[1:]
        return signature

    def verify(self, data: bytes, signature: bytes) -> None:
        size = self._coordinate_size
        if len(signature) != 2 * size:
            raise SignatureError("Invalid signature")

        r = int.from_bytes(signature[:size], "big")
        s = int.from_bytes(signature[size:], "big")
        try:
            self._public_key.verify(
                encode_dss_signature(r, s),
                self._digest(data),
                self._signature_algorithm(),
            )
        except InvalidSignature:
            raise SignatureError("Invalid signature") from None


class ES256(ECDSAAlgorithm):
    name = "ES256"
    hash_algorithm = hashes.SHA256
    curve = ec.SECP256R1


class ES384(ECDSAAlgorithm):
    name = "ES384"
    hash_algorithm = hashes.SHA384
    curve = ec.SECP384R1


class ES512(ECDSAAlgorithm):
    name = "ES512"
    hash_algorithm = hashes.SHA512
    curve = ec.SECP521R1
