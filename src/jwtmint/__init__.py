from __future__ import annotations

import logging

from jwtmint.algorithms import (
    ES256,
    ES384,
    ES512,
    HS256,
    HS384,
    HS512,
    Algorithm,
    NoneAlgorithm,
)
from jwtmint.claims import Claim, ClaimSet, ClaimType, Header, Payload
from jwtmint.codec import DecodedToken, decode
from jwtmint.services import Clock, TokenBuilder, TokenMint, TokenVerifier
from jwtmint.settings import Settings, VerifierSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())


def create() -> TokenBuilder:
    """Return a new builder for a token."""
    return TokenBuilder()


def verify(clock: Clock | None = None) -> TokenVerifier:
    """Return a new verifier, optionally reading time from `clock`."""
    return TokenVerifier(clock=clock)


__all__ = [
    "Algorithm",
    "Claim",
    "ClaimSet",
    "ClaimType",
    "DecodedToken",
    "ES256",
    "ES384",
    "ES512",
    "HS256",
    "HS384",
    "HS512",
    "Header",
    "NoneAlgorithm",
    "Payload",
    "Settings",
    "TokenBuilder",
    "TokenMint",
    "TokenVerifier",
    "VerifierSettings",
    "create",
    "decode",
    "verify",
]
