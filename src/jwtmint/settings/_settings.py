from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from jwtmint.exceptions import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """
    Settings for token generation and validation by `TokenMint`.

    Attributes:
        issuer (str): The entity that issues the token (iss).
        audience (str): The intended recipient of the token (aud).
        expiry_duration (timedelta): The duration for which the token is valid.
        clock_skew_leeway (int): Allowed clock skew in seconds (default: 10).
        purpose (str | None): Optional use-case scope, stored as the `pur` claim.
        key_id (str | None): Optional key identifier, stored as the `kid` header.

    Example:
    ```
        settings = Settings(
            issuer="my-app",
            audience="my-service",
            expiry_duration=timedelta(minutes=15),
            purpose="email-verification",
        )
    ```
    """

    issuer: str
    audience: str
    expiry_duration: timedelta
    clock_skew_leeway: int = 10
    purpose: str | None = None
    key_id: str | None = None

    def __post_init__(self) -> None:
        if self.expiry_duration <= timedelta(0):
            raise ConfigurationError("expiry_duration must be positive")
        if self.clock_skew_leeway < 0:
            raise ConfigurationError("clock_skew_leeway must not be negative")
