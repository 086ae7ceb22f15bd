import json
from datetime import datetime, timezone

from pytest import mark, raises

import jwtmint
from jwtmint.algorithms import ES256, HS256, HS384, HS512, Algorithm, NoneAlgorithm
from jwtmint.codec import base64url_decode, decode
from jwtmint.exceptions import SignatureError


def test_builder_round_trip(hmac_secret: bytes) -> None:
    """Decoding a built token gives back every claim that was set."""
    expires_at = datetime(2030, 1, 1, 12, 5, tzinfo=timezone.utc)
    token = (
        jwtmint.create()
        .set_type("JWT")
        .set_content_type("JWT")
        .set_key_id("k1")
        .set_issuer("auth0")
        .set_subject("alice")
        .set_audience({"api", "web"})
        .set_expires_at(expires_at)
        .set_not_before(1893499200)
        .set_issued_at(1893499200)
        .set_id("id-1")
        .set_header_claim("x5t", "thumb")
        .set_payload_claim("roles", ["admin", "user"])
        .set_payload_claim("profile", {"age": 30, "score": 1.5, "nick": None})
        .sign(HS256(hmac_secret))
    )

    decoded = decode(token)
    header, payload = decoded.header, decoded.payload
    assert decoded.get_algorithm() == "HS256"
    assert header.get_type() == "JWT"
    assert header.get_content_type() == "JWT"
    assert header.get_key_id() == "k1"
    assert header.get_claim("x5t").as_string() == "thumb"
    assert payload.get_issuer() == "auth0"
    assert payload.get_subject() == "alice"
    assert payload.get_audience() == frozenset({"api", "web"})
    assert payload.get_expires_at() == expires_at
    assert payload.get_not_before() == datetime(2030, 1, 1, 12, tzinfo=timezone.utc)
    assert payload.get_id() == "id-1"
    assert payload.get_claim("roles").to_json() == ["admin", "user"]
    assert payload.get_claim("profile").to_json() == {
        "age": 30,
        "score": 1.5,
        "nick": None,
    }


@mark.parametrize("algorithm_class", [HS256, HS384, HS512])
def test_alg_header_follows_signing_algorithm(algorithm_class, hmac_secret: bytes) -> None:
    """The alg header is overwritten with the algorithm used to sign."""
    token = jwtmint.create().set_algorithm("none").sign(algorithm_class(hmac_secret))
    assert decode(token).get_algorithm() == algorithm_class.name


def test_compact_form_has_no_padding(hmac_secret: bytes) -> None:
    token = jwtmint.create().set_subject("a").sign(HS256(hmac_secret))
    assert "=" not in token
    assert token.count(".") == 2


def test_signature_covers_encoded_segments(hmac_secret: bytes) -> None:
    token = jwtmint.create().set_subject("alice").sign(HS256(hmac_secret))
    header, payload, signature = token.split(".")
    expected = HS256(hmac_secret).sign(f"{header}.{payload}".encode())
    assert base64url_decode(signature) == expected


def test_compact_json_serialization(hmac_secret: bytes) -> None:
    token = jwtmint.create().set_subject("alice").sign(HS256(hmac_secret))
    payload_json = base64url_decode(token.split(".")[1])
    assert payload_json == b'{"sub":"alice"}'
    assert json.loads(decode(token).header_json) == {"alg": "HS256"}


def test_none_algorithm_has_empty_signature() -> None:
    token = jwtmint.create().set_subject("alice").sign(NoneAlgorithm())
    assert token.endswith(".")
    assert decode(token).signature == b""


def test_string_audience_stays_string(hmac_secret: bytes) -> None:
    token = jwtmint.create().set_audience("api").sign(HS256(hmac_secret))
    assert decode(token).payload.get_claim("aud").as_string() == "api"


def test_signing_failure_is_signature_error(p256_key) -> None:
    """Algorithm failures surface from sign as SignatureError."""
    verify_only = ES256(public_key=p256_key.public_key())
    with raises(SignatureError):
        jwtmint.create().set_subject("alice").sign(verify_only)


class BrokenKeyAlgorithm(Algorithm):
    name = "HS256"

    def sign(self, data: bytes) -> bytes:
        raise ValueError("key material unusable")

    def verify(self, data: bytes, signature: bytes) -> None:
        raise AssertionError("not used")


def test_algorithm_errors_are_wrapped_in_signature_error() -> None:
    """Any failure inside an algorithm's sign is reported as SignatureError."""
    with raises(SignatureError) as info:
        jwtmint.create().set_subject("alice").sign(BrokenKeyAlgorithm())
    assert isinstance(info.value.__cause__, ValueError)
