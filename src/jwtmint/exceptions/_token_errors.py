from __future__ import annotations

from jwt import exceptions as jwt_exceptions


class TokenError(jwt_exceptions.PyJWTError):
    """Base class for every error raised by jwtmint."""


class ConfigurationError(TokenError, ValueError):
    """Settings or environment values are invalid."""


class FormatError(TokenError, jwt_exceptions.DecodeError):
    """Token is not in compact serialization (header.payload.signature)."""


class DecodeError(TokenError, jwt_exceptions.DecodeError):
    """A token segment is not valid base64url or not a JSON object."""


class ClaimNotFound(TokenError):
    """A claim was requested that the claim set does not contain."""

    def __init__(self, name: str) -> None:
        super().__init__(f"claim '{name}' not found")
        self.name = name


class ClaimTypeMismatch(TokenError, TypeError):
    """A claim accessor was used on a claim of another type."""


class SignatureError(TokenError, jwt_exceptions.InvalidSignatureError):
    """Signature is missing, invalid, or could not be generated."""


class UnsupportedAlgorithm(TokenError, jwt_exceptions.InvalidAlgorithmError):
    """Token names an algorithm the verifier has not registered."""


class ExpiredToken(TokenError, jwt_exceptions.ExpiredSignatureError):
    """Token is past its expiry, or was issued in the future."""


class NotYetValid(TokenError, jwt_exceptions.ImmatureSignatureError):
    """Token is used before its not-before time."""


class ClaimMismatch(TokenError, jwt_exceptions.InvalidTokenError):
    """A required claim is missing or differs from the expected value."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"claim '{name}' does not match expected")
        self.name = name


class AudienceMismatch(ClaimMismatch, jwt_exceptions.InvalidAudienceError):
    """Token does not contain every required audience."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "aud",
            message or "token doesn't contain the required audience",
        )
