import io

import pytest

from mhash import create, decode, encode, encode_b58, encode_hex
from mhash.errors import InvalidCharacterError, InvalidDigestError, MalformedEncodingError

SHA1 = create("sha1", "0beec7b5ea3f0fdbc95d0dd47f3c5bc275da8a33")
SHA2_256 = create("sha2-256", "dbd318c1c462aee872f41109a4dfd3048871a03dedd0fe0e757ced57dad6f2d7")


def test_decode_hex_string():
    assert encode_hex(SHA1) == "11140beec7b5ea3f0fdbc95d0dd47f3c5bc275da8a33"
    assert decode("11140beec7b5ea3f0fdbc95d0dd47f3c5bc275da8a33") == SHA1
    assert decode("11140BEEC7B5EA3F0FDBC95D0DD47F3C5BC275DA8A33") == SHA1


def test_decode_base58_string():
    assert encode_b58(SHA2_256) == "Qmd8kgzaFLGYtTS1zfF37qKGgYQd5yKcQMyBeSa8UkUz4W"
    assert SHA2_256.b58() == "Qmd8kgzaFLGYtTS1zfF37qKGgYQd5yKcQMyBeSa8UkUz4W"
    assert decode("Qmd8kgzaFLGYtTS1zfF37qKGgYQd5yKcQMyBeSa8UkUz4W") == SHA2_256


def test_text_forms_round_trip():
    for mhash in (SHA1, SHA2_256, create(0x02, "00000001")):
        assert decode(encode_hex(mhash)) == mhash
        assert decode(encode_b58(mhash)) == mhash


def test_hex_takes_precedence():
    # "1234" is also valid Base58, but it is read as two hex bytes.
    with pytest.raises(MalformedEncodingError):
        decode("1234")


def test_invalid_base58_string():
    with pytest.raises(InvalidCharacterError):
        decode("Qmd8kgzaFLGYtTS1zfF37qKGgYQd5yKcQMyBeSa8UkUz40")


def test_decode_bytes():
    assert decode(encode(SHA1)) == SHA1
    assert decode(bytearray(encode(SHA1))) == SHA1
    assert decode(memoryview(encode(SHA1))) == SHA1


def test_decode_stream():
    stream = io.BytesIO(encode(SHA2_256) + b"next")
    assert decode(stream) == SHA2_256
    assert stream.read() == b"next"


def test_decode_passes_options():
    with pytest.raises(InvalidDigestError):
        decode(encode_hex(SHA1), max_length=4)
    with pytest.raises(InvalidDigestError):
        decode(io.BytesIO(encode(SHA1)), max_length=4)


def test_decode_rejects_text_stream():
    with pytest.raises(TypeError, match="text stream"):
        decode(io.StringIO(encode_hex(SHA1)))


@pytest.mark.parametrize("source", [None, 1234, ["11", "04"], object()])
def test_decode_unsupported_source(source):
    with pytest.raises(TypeError):
        decode(source)
