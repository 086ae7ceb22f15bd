from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from jwtmint.algorithms import Algorithm
from jwtmint.claims import Claim
from jwtmint.codec import base64url_encode, serialize
from jwtmint.exceptions import SignatureError

logger = logging.getLogger(__name__)


class TokenBuilder:
    """
    Accumulates header and payload claims and signs them into a compact token.

    Every setter returns the builder so calls can be chained:
    ```
        token = (
            TokenBuilder()
            .set_issuer("auth0")
            .set_audience({"api", "web"})
            .set_expires_at(now + timedelta(minutes=5))
            .sign(HS256("secret"))
        )
    ```
    """

    def __init__(self) -> None:
        self._header_claims: dict[str, Claim] = {}
        self._payload_claims: dict[str, Claim] = {}

    def set_header_claim(self, name: str, value: Any) -> TokenBuilder:
        self._header_claims[name] = Claim(value)
        return self

    def set_payload_claim(self, name: str, value: Any) -> TokenBuilder:
        self._payload_claims[name] = Claim(value)
        return self

    def set_algorithm(self, name: str) -> TokenBuilder:
        """Normally not needed: `sign` always writes the algorithm it uses."""
        return self.set_header_claim("alg", name)

    def set_type(self, value: str) -> TokenBuilder:
        return self.set_header_claim("typ", value)

    def set_content_type(self, value: str) -> TokenBuilder:
        return self.set_header_claim("cty", value)

    def set_key_id(self, value: str) -> TokenBuilder:
        return self.set_header_claim("kid", value)

    def set_issuer(self, value: str) -> TokenBuilder:
        return self.set_payload_claim("iss", value)

    def set_subject(self, value: str) -> TokenBuilder:
        return self.set_payload_claim("sub", value)

    def set_audience(self, audience: str | Iterable[str]) -> TokenBuilder:
        if isinstance(audience, str):
            return self.set_payload_claim("aud", audience)
        return self.set_payload_claim("aud", frozenset(audience))

    def set_expires_at(self, moment: datetime | int) -> TokenBuilder:
        return self.set_payload_claim("exp", moment)

    def set_not_before(self, moment: datetime | int) -> TokenBuilder:
        return self.set_payload_claim("nbf", moment)

    def set_issued_at(self, moment: datetime | int) -> TokenBuilder:
        return self.set_payload_claim("iat", moment)

    def set_id(self, value: str) -> TokenBuilder:
        return self.set_payload_claim("jti", value)

    def sign(self, algorithm: Algorithm) -> str:
        """
        Sign the accumulated claims and return the compact token.

        The `alg` header is always overwritten with `algorithm.name`.
        Raises SignatureError if the algorithm cannot produce a signature.
        """
        self.set_algorithm(algorithm.name)

        header = base64url_encode(
            serialize({name: c.to_json() for name, c in self._header_claims.items()})
        )
        payload = base64url_encode(
            serialize({name: c.to_json() for name, c in self._payload_claims.items()})
        )
        signing_input = f"{header}.{payload}"
        try:
            signature = algorithm.sign(signing_input.encode("ascii"))
        except SignatureError:
            raise
        except Exception as error:
            raise SignatureError("signature generation failed") from error

        logger.debug(
            "Signed token with %s (%d payload claims)",
            algorithm.name,
            len(self._payload_claims),
        )
        return f"{signing_input}.{base64url_encode(signature)}"
