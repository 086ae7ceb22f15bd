import jwt
from pytest import mark, raises

from jwtmint.codec import base64url_decode, base64url_encode, decode
from jwtmint.exceptions import DecodeError, FormatError

# RFC 7515 appendix A.1 (HS256)
RFC_HEADER = "eyJ0eXAiOiJKV1QiLA0KICJhbGciOiJIUzI1NiJ9"
RFC_PAYLOAD = (
    "eyJpc3MiOiJqb2UiLA0KICJleHAiOjEzMDA4MTkzODAsDQogImh0dHA6Ly9leGFt"
    "cGxlLmNvbS9pc19yb290Ijp0cnVlfQ"
)
RFC_SIGNATURE = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
RFC_TOKEN = f"{RFC_HEADER}.{RFC_PAYLOAD}.{RFC_SIGNATURE}"


def test_decode_rfc_example() -> None:
    """Decodes the RFC 7515 example and keeps every segment."""
    token = decode(RFC_TOKEN)

    assert token.token == RFC_TOKEN
    assert token.header_base64 == RFC_HEADER
    assert token.payload_base64 == RFC_PAYLOAD
    assert token.signature_base64 == RFC_SIGNATURE
    assert token.header_json == '{"typ":"JWT",\r\n "alg":"HS256"}'
    assert len(token.signature) == 32

    assert token.get_algorithm() == "HS256"
    assert token.header.get_type() == "JWT"
    assert token.payload.get_issuer() == "joe"
    assert token.payload.get_claim("exp").as_int() == 1300819380
    assert token.payload.get_claim("http://example.com/is_root").as_bool() is True
    assert token.signing_input == f"{RFC_HEADER}.{RFC_PAYLOAD}".encode()


def test_signature_is_not_parsed() -> None:
    """An unsigned token has an empty signature segment."""
    token = decode(f"{RFC_HEADER}.{RFC_PAYLOAD}.")
    assert token.signature == b""


@mark.parametrize("value", ["abc", "a.b"])
def test_missing_separators(value: str) -> None:
    with raises(FormatError):
        decode(value)


def test_extra_separators() -> None:
    """A fourth segment is rejected rather than folded into the signature."""
    with raises(FormatError):
        decode(f"{RFC_TOKEN}.extra")


def test_invalid_base64_header() -> None:
    with raises(DecodeError):
        decode("!!!.b.c")


def test_header_must_be_json() -> None:
    not_json = base64url_encode(b"not json")
    with raises(DecodeError):
        decode(f"{not_json}.{RFC_PAYLOAD}.")


def test_header_must_be_object() -> None:
    array = base64url_encode(b"[1, 2]")
    with raises(DecodeError):
        decode(f"{array}.{RFC_PAYLOAD}.")


def test_nan_is_rejected() -> None:
    payload = base64url_encode(b'{"exp": NaN}')
    with raises(DecodeError):
        decode(f"{RFC_HEADER}.{payload}.")


def test_format_errors_are_pyjwt_decode_errors() -> None:
    """Callers catching PyJWT errors also catch ours."""
    with raises(jwt.DecodeError):
        decode("abc")


def test_base64url_strips_and_restores_padding() -> None:
    encoded = base64url_encode(b"\xfb\xff")
    assert encoded == "-_8"
    assert base64url_decode(encoded) == b"\xfb\xff"
    assert base64url_decode("-_8=") == b"\xfb\xff"


@mark.parametrize("segment", ["-_9", "-_-", "QR", "QR==", "QUJ"])
def test_base64url_rejects_non_zero_unused_bits(segment: str) -> None:
    """Only the canonical spelling of a byte string decodes."""
    with raises(DecodeError):
        base64url_decode(segment)


def test_base64url_accepts_canonical_tails() -> None:
    assert base64url_decode("QQ") == b"A"
    assert base64url_decode("QQ==") == b"A"
    assert base64url_decode("QUI") == b"AB"


@mark.parametrize("segment", ["a+b/", "abc?", "abcde"])
def test_base64url_rejects_invalid_input(segment: str) -> None:
    """Standard-alphabet characters and a dangling character fail."""
    with raises(DecodeError):
        base64url_decode(segment)
