from ._token_builder import TokenBuilder
from ._token_mint import TokenMint
from ._token_verifier import Clock, TokenVerifier

__all__ = ["Clock", "TokenBuilder", "TokenMint", "TokenVerifier"]
