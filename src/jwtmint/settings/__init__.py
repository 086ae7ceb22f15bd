from ._settings import Settings
from ._verifier_settings import VerifierSettings

__all__ = ["Settings", "VerifierSettings"]
