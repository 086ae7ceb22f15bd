import time
from datetime import datetime, timedelta, timezone

from cryptography.hazmat.primitives.asymmetric import ec
from dotenv import load_dotenv
from pytest import fixture, skip

from jwtmint.services import TokenMint
from jwtmint.settings import Settings
from jwtmint.algorithms import HS256

# Load all env variables.
load_dotenv()

NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@fixture
def now() -> datetime:
    """Fixed point in time used by every clock-driven test."""
    return NOW


@fixture
def clock():
    """Clock returning the fixed test time."""
    return lambda: NOW


@fixture(scope="session")
def hmac_secret() -> bytes:
    """64 byte secret, long enough for HS512."""
    return b"jwtmint-test-secret-".ljust(64, b"x")


@fixture(scope="session")
def p256_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@fixture(scope="session")
def p384_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP384R1())


@fixture(scope="session")
def p521_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP521R1())


@fixture
def email_verification_mint(hmac_secret: bytes, clock) -> TokenMint:
    """Create token mint instance and return it."""
    return TokenMint(
        settings=Settings(
            issuer="mytest.service",
            audience="user",
            purpose="email-verification",
            expiry_duration=timedelta(minutes=5),
            key_id="2030-01-rot-1",
        ),
        algorithm=HS256(hmac_secret),
        clock=clock,
    )


@fixture
def naive_clock(monkeypatch):
    """
    Clock returning the fixed test time without tzinfo, with the process
    local zone set to America/New_York for the duration of the test.
    """
    if not hasattr(time, "tzset"):
        skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield lambda: NOW.replace(tzinfo=None)
    monkeypatch.undo()
    time.tzset()
