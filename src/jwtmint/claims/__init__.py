from ._claim import Claim, ClaimType
from ._claim_set import ClaimSet, Header, Payload

__all__ = ["Claim", "ClaimSet", "ClaimType", "Header", "Payload"]
