from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from jwtmint.algorithms import Algorithm
from jwtmint.claims import Claim, ClaimType, Payload
from jwtmint.codec import DecodedToken, decode
from jwtmint.exceptions import (
    AudienceMismatch,
    ClaimMismatch,
    ClaimTypeMismatch,
    ExpiredToken,
    NotYetValid,
    SignatureError,
    UnsupportedAlgorithm,
)
from jwtmint.settings import VerifierSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_TIME_CLAIMS = frozenset({"exp", "nbf", "iat"})


def _system_clock() -> datetime:
    return datetime.now(timezone.utc)


class TokenVerifier:
    """
    Checks that a decoded token carries a valid signature from an allowed
    algorithm, is inside its validity window and holds the required claims.

    Only algorithms registered with `allow_algorithm` are accepted, looked up
    by the exact `alg` header value.

    Example:
    ```
        verifier = (
            TokenVerifier()
            .allow_algorithm(HS256("secret"))
            .with_issuer("auth0")
            .leeway(30)
        )
        verifier.verify(decode(token))
    ```
    """

    def __init__(
        self,
        clock: Clock | None = None,
        settings: VerifierSettings | None = None,
    ) -> None:
        self._clock = clock or _system_clock
        self._settings = settings or VerifierSettings()
        self._required_claims: dict[str, Claim] = {}
        self._algorithms: dict[str, Algorithm] = {}

    @property
    def settings(self) -> VerifierSettings:
        return self._settings

    def leeway(self, seconds: int) -> TokenVerifier:
        """Default leeway for exp, nbf and iat."""
        self._settings = replace(self._settings, default_leeway=seconds)
        return self

    def expires_at_leeway(self, seconds: int) -> TokenVerifier:
        self._settings = replace(self._settings, expires_at_leeway=seconds)
        return self

    def not_before_leeway(self, seconds: int) -> TokenVerifier:
        self._settings = replace(self._settings, not_before_leeway=seconds)
        return self

    def issued_at_leeway(self, seconds: int) -> TokenVerifier:
        self._settings = replace(self._settings, issued_at_leeway=seconds)
        return self

    def with_issuer(self, issuer: str) -> TokenVerifier:
        return self.with_claim("iss", issuer)

    def with_subject(self, subject: str) -> TokenVerifier:
        return self.with_claim("sub", subject)

    def with_audience(self, audience: str | Iterable[str]) -> TokenVerifier:
        """Every given audience must be present in the token."""
        if isinstance(audience, str):
            audience = {audience}
        return self.with_claim("aud", frozenset(audience))

    def with_id(self, token_id: str) -> TokenVerifier:
        return self.with_claim("jti", token_id)

    def with_claim(self, name: str, value: Any) -> TokenVerifier:
        if name in _TIME_CLAIMS:
            raise ValueError(
                f"'{name}' is checked against the clock; configure its leeway instead"
            )
        claim = Claim(value)
        if name == "aud" and claim.type is not ClaimType.STRING:
            try:
                claim.as_set()
            except ClaimTypeMismatch:
                raise ValueError(
                    "'aud' must be a string or an array of strings"
                ) from None
        self._required_claims[name] = claim
        return self

    def allow_algorithm(self, algorithm: Algorithm) -> TokenVerifier:
        self._algorithms[algorithm.name] = algorithm
        return self

    def verify(self, token: DecodedToken | str) -> DecodedToken:
        """
        Verify `token` and return it decoded.

        Raises UnsupportedAlgorithm, SignatureError, ExpiredToken, NotYetValid,
        ClaimMismatch or AudienceMismatch. The signature is checked before any
        claim is looked at. A validly signed token whose exp, nbf or iat is
        not an integer raises ClaimTypeMismatch.

        A naive `datetime` from the clock is read as UTC.
        """
        if isinstance(token, str):
            token = decode(token)

        algorithm = self._resolve_algorithm(token)
        try:
            algorithm.verify(token.signing_input, token.signature)
        except SignatureError:
            logger.debug("Rejected token: bad %s signature", algorithm.name)
            raise

        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self._check_times(token.payload, now.timestamp())

        for name, expected in self._required_claims.items():
            if name == "aud":
                self._check_audience(token.payload, expected)
            else:
                self._check_claim(token.payload, name, expected)
        return token

    def _resolve_algorithm(self, token: DecodedToken) -> Algorithm:
        alg = token.header.get("alg")
        if alg is None or alg.type is not ClaimType.STRING:
            raise UnsupportedAlgorithm("token header has no algorithm")
        try:
            return self._algorithms[alg.as_string()]
        except KeyError:
            logger.debug("Rejected token: algorithm %r not allowed", alg.as_string())
            raise UnsupportedAlgorithm("wrong algorithm") from None

    def _check_times(self, payload: Payload, now: float) -> None:
        settings = self._settings
        if payload.has_expires_at():
            expires_at = payload.get_claim("exp").as_int()
            if now > expires_at + settings.leeway_for("exp"):
                raise ExpiredToken("token expired")
        if payload.has_issued_at():
            issued_at = payload.get_claim("iat").as_int()
            if now < issued_at - settings.leeway_for("iat"):
                raise ExpiredToken("token issued in the future")
        if payload.has_not_before():
            not_before = payload.get_claim("nbf").as_int()
            if now < not_before - settings.leeway_for("nbf"):
                raise NotYetValid("token not yet valid")

    @staticmethod
    def _check_audience(payload: Payload, expected: Claim) -> None:
        if not payload.has_audience():
            raise AudienceMismatch()
        try:
            audience = payload.get_audience()
        except ClaimTypeMismatch as error:
            raise AudienceMismatch() from error
        if expected.type is ClaimType.STRING:
            required = frozenset({expected.as_string()})
        else:
            required = expected.as_set()
        if not required <= audience:
            raise AudienceMismatch()

    @staticmethod
    def _check_claim(payload: Payload, name: str, expected: Claim) -> None:
        if not payload.has_claim(name):
            raise ClaimMismatch(name, f"token is missing the '{name}' claim")
        actual = payload.get_claim(name)
        if actual.type is not expected.type:
            raise ClaimMismatch(name, f"claim '{name}' type mismatch")

        if expected.type is ClaimType.ARRAY:
            try:
                matches = actual.as_set() == expected.as_set()
            except ClaimTypeMismatch as error:
                raise ClaimMismatch(name) from error
        else:
            matches = actual == expected
        if not matches:
            raise ClaimMismatch(name)
