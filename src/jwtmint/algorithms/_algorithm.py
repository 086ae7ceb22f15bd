from __future__ import annotations

from abc import ABC, abstractmethod


class Algorithm(ABC):
    """
    A JWS signing algorithm.

    Instances hold only their key material and keep no state between calls,
    so a configured algorithm can be shared by builders and verifiers.
    """

    name: str

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        """Return the signature of `data`; raise SignatureError on failure."""

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> None:
        """Raise SignatureError unless `signature` is valid for `data`."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
