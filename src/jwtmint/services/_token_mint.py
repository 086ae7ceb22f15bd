from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from jwtmint.algorithms import Algorithm
from jwtmint.claims import Payload
from jwtmint.exceptions import ClaimMismatch
from jwtmint.settings import Settings

from ._token_builder import TokenBuilder
from ._token_verifier import Clock, TokenVerifier

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({"iss", "aud", "sub", "iat", "nbf", "exp", "jti", "pur"})
REQUIRED_CLAIMS = ("sub", "iat", "nbf", "exp", "jti")


class TokenMint:
    """
    High-level API to generate and validate limited-time tokens with strict scoping.
    """

    def __init__(
        self,
        settings: Settings,
        algorithm: Algorithm,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings
        self.algorithm = algorithm
        self._clock = clock

    def _current_time(self) -> datetime:
        if self._clock is None:
            return datetime.now(timezone.utc)
        now = self._clock()
        if now.tzinfo is None:
            # naive clocks read UTC, never local time
            now = now.replace(tzinfo=timezone.utc)
        return now

    def generate_token(
        self,
        subject: str,
        extra_claims: dict[str, Any] | None = None,
        not_before: timedelta | None = None,
    ) -> str:
        now = self._current_time()
        expires_at = now + self.settings.expiry_duration
        not_before_time = now + (not_before or timedelta(seconds=0))
        token_id = secrets.token_urlsafe(24)

        builder = (
            TokenBuilder()
            .set_type("JWT")
            .set_issuer(self.settings.issuer)
            .set_audience(self.settings.audience)
            .set_subject(subject)
            .set_issued_at(now)
            .set_not_before(not_before_time)
            .set_expires_at(expires_at)
            .set_id(token_id)
        )
        if self.settings.key_id:
            builder.set_key_id(self.settings.key_id)
        if self.settings.purpose:
            builder.set_payload_claim("pur", self.settings.purpose)

        if extra_claims:
            # Avoid collisions with registered claims
            if RESERVED_CLAIMS.intersection(extra_claims.keys()):
                raise ValueError("extra_claims collides with registered claims")
            for name, value in extra_claims.items():
                builder.set_payload_claim(name, value)

        logger.debug("Issuing token %s for subject %r", token_id, subject)
        return builder.sign(self.algorithm)

    def _build_verifier(self) -> TokenVerifier:
        verifier = (
            TokenVerifier(clock=self._current_time)
            .allow_algorithm(self.algorithm)
            .leeway(self.settings.clock_skew_leeway)
            .with_issuer(self.settings.issuer)
            .with_audience(self.settings.audience)
        )
        if self.settings.purpose:
            verifier.with_claim("pur", self.settings.purpose)
        return verifier

    def validate_token(self, token: str) -> Payload:
        """
        Validate signature, lifetime, audience, issuer and purpose.
        Returns the payload claims if valid; raises a TokenError on failure.
        """
        decoded = self._build_verifier().verify(token)

        payload = decoded.payload
        for name in REQUIRED_CLAIMS:
            if not payload.has_claim(name):
                raise ClaimMismatch(name, f"token is missing the '{name}' claim")
        return payload
