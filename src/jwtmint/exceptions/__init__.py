from jwt import InvalidTokenError
from ._token_errors import (
    AudienceMismatch,
    ClaimMismatch,
    ClaimNotFound,
    ClaimTypeMismatch,
    ConfigurationError,
    DecodeError,
    ExpiredToken,
    FormatError,
    NotYetValid,
    SignatureError,
    TokenError,
    UnsupportedAlgorithm,
)

__all__ = [
    "AudienceMismatch",
    "ClaimMismatch",
    "ClaimNotFound",
    "ClaimTypeMismatch",
    "ConfigurationError",
    "DecodeError",
    "ExpiredToken",
    "FormatError",
    "InvalidTokenError",
    "NotYetValid",
    "SignatureError",
    "TokenError",
    "UnsupportedAlgorithm",
]
