from __future__ import annotations

from dataclasses import dataclass, fields
from os import environ

from jwtmint.exceptions import ConfigurationError


@dataclass(frozen=True)
class VerifierSettings:
    """
    Leeway policy for the time-based claims checked by `TokenVerifier`.

    Attributes:
        default_leeway (int): Seconds of tolerance for exp, nbf and iat (default: 0).
        expires_at_leeway (int | None): Override for exp.
        not_before_leeway (int | None): Override for nbf.
        issued_at_leeway (int | None): Override for iat.
    """

    default_leeway: int = 0
    expires_at_leeway: int | None = None
    not_before_leeway: int | None = None
    issued_at_leeway: int | None = None

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None and value < 0:
                raise ConfigurationError(f"{field.name} must not be negative")

    @classmethod
    def from_environ(cls, prefix: str = "JWTMINT_") -> VerifierSettings:
        """
        Example loader:
        - JWTMINT_LEEWAY = "30"
        - JWTMINT_EXPIRES_AT_LEEWAY = "60"
        - JWTMINT_NOT_BEFORE_LEEWAY = "5"
        - JWTMINT_ISSUED_AT_LEEWAY = "5"
        Unset variables keep their defaults.
        """
        names = {
            "default_leeway": "LEEWAY",
            "expires_at_leeway": "EXPIRES_AT_LEEWAY",
            "not_before_leeway": "NOT_BEFORE_LEEWAY",
            "issued_at_leeway": "ISSUED_AT_LEEWAY",
        }
        values: dict[str, int] = {}
        for attribute, suffix in names.items():
            raw = environ.get(f"{prefix}{suffix}")
            if raw is None or not raw.strip():
                continue
            try:
                values[attribute] = int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{prefix}{suffix} must be an integer number of seconds, "
                    f"got {raw!r}"
                ) from None
        return cls(**values)

    def leeway_for(self, name: str) -> int:
        """Return the leeway for exp, nbf or iat, falling back to the default."""
        override = {
            "exp": self.expires_at_leeway,
            "nbf": self.not_before_leeway,
            "iat": self.issued_at_leeway,
        }.get(name)
        return self.default_leeway if override is None else override
