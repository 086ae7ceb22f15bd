from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import datetime
from typing import Any

from jwtmint.exceptions import ClaimNotFound, ClaimTypeMismatch

from ._claim import Claim, ClaimType


class ClaimSet(Mapping[str, Claim]):
    """Read-only mapping of claim name to Claim."""

    def __init__(self, claims: Mapping[str, Any] | None = None) -> None:
        self._claims: dict[str, Claim] = {
            name: Claim(value) for name, value in (claims or {}).items()
        }

    def __getitem__(self, name: str) -> Claim:
        return self._claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def has_claim(self, name: str) -> bool:
        return name in self._claims

    def get_claim(self, name: str) -> Claim:
        try:
            return self._claims[name]
        except KeyError:
            raise ClaimNotFound(name) from None

    def to_json(self) -> dict[str, Any]:
        return {name: claim.to_json() for name, claim in self._claims.items()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"


class Header(ClaimSet):
    """JOSE header claims: alg, typ, cty, kid."""

    def has_algorithm(self) -> bool:
        return self.has_claim("alg")

    def has_type(self) -> bool:
        return self.has_claim("typ")

    def has_content_type(self) -> bool:
        return self.has_claim("cty")

    def has_key_id(self) -> bool:
        return self.has_claim("kid")

    def get_algorithm(self) -> str:
        return self.get_claim("alg").as_string()

    def get_type(self) -> str:
        return self.get_claim("typ").as_string()

    def get_content_type(self) -> str:
        return self.get_claim("cty").as_string()

    def get_key_id(self) -> str:
        return self.get_claim("kid").as_string()


class Payload(ClaimSet):
    """
    Registered payload claims: iss, sub, aud, exp, nbf, iat, jti.

    Getters raise ClaimNotFound when the claim is absent and
    ClaimTypeMismatch when it holds an unexpected type.
    """

    def has_issuer(self) -> bool:
        return self.has_claim("iss")

    def has_subject(self) -> bool:
        return self.has_claim("sub")

    def has_audience(self) -> bool:
        return self.has_claim("aud")

    def has_expires_at(self) -> bool:
        return self.has_claim("exp")

    def has_not_before(self) -> bool:
        return self.has_claim("nbf")

    def has_issued_at(self) -> bool:
        return self.has_claim("iat")

    def has_id(self) -> bool:
        return self.has_claim("jti")

    def get_issuer(self) -> str:
        return self.get_claim("iss").as_string()

    def get_subject(self) -> str:
        return self.get_claim("sub").as_string()

    def get_audience(self) -> frozenset[str]:
        """A single string audience is returned as a one-element set."""
        claim = self.get_claim("aud")
        if claim.type is ClaimType.STRING:
            return frozenset({claim.as_string()})
        if claim.type is ClaimType.ARRAY:
            return claim.as_set()
        raise ClaimTypeMismatch(f"claim 'aud' is {claim.type.value}")

    def get_expires_at(self) -> datetime:
        return self.get_claim("exp").as_date()

    def get_not_before(self) -> datetime:
        return self.get_claim("nbf").as_date()

    def get_issued_at(self) -> datetime:
        return self.get_claim("iat").as_date()

    def get_id(self) -> str:
        return self.get_claim("jti").as_string()
