from ._algorithm import Algorithm
from ._ecdsa import ES256, ES384, ES512, ECDSAAlgorithm
from ._hmac import HS256, HS384, HS512, HMACAlgorithm
from ._none import NoneAlgorithm

__all__ = [
    "Algorithm",
    "ECDSAAlgorithm",
    "ES256",
    "ES384",
    "ES512",
    "HMACAlgorithm",
    "HS256",
    "HS384",
    "HS512",
    "NoneAlgorithm",
]
