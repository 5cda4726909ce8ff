import pytest

from mhash import base58
from mhash.errors import InvalidCharacterError


def test_encoding():
    assert base58.encode(b"") == ""
    assert base58.encode(b"\x00") == "1"
    assert base58.encode(b"\x00\x00") == "11"
    assert base58.encode(b"Hello World!") == "2NEpo7TZRRrLZSi2U"


def test_decoding():
    assert base58.decode("") == b""
    assert base58.decode("1") == b"\x00"
    assert base58.decode("11") == b"\x00\x00"
    assert base58.decode("2NEpo7TZRRrLZSi2U") == b"Hello World!"


def test_leading_zero_bytes():
    assert base58.encode(b"\x00\x00\x01") == "112"
    assert base58.decode("112") == b"\x00\x00\x01"
    assert base58.decode(base58.encode(b"\x00\x00\x00\xff\x00")) == b"\x00\x00\x00\xff\x00"


def test_high_bit_bytes_have_no_sign_byte():
    assert base58.encode(b"\xff") == "5Q"
    assert base58.decode("5Q") == b"\xff"
    assert base58.encode(b"\x00\x80") == "13D"
    assert base58.decode("13D") == b"\x00\x80"
    assert base58.decode(base58.encode(b"\x80\x00")) == b"\x80\x00"


@pytest.mark.parametrize("text", ["0", "O", "I", "l", "12l4", "abc+"])
def test_invalid_characters(text):
    with pytest.raises(InvalidCharacterError) as exc_info:
        base58.decode(text)
    assert exc_info.value.value in "0OIl+"


def test_reflexive_encoding(random_bytes):
    for _ in range(100):
        data = random_bytes(30)
        assert base58.decode(base58.encode(data)) == data
