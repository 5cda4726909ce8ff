"""Unsigned variable-length integers (7 bits per byte, low group first)."""

from typing import BinaryIO, Tuple

from .errors import MalformedEncodingError

# Longest accepted encoding; enough for any 63-bit value.
MAX_LENGTH = 9


def encode(value: int) -> bytes:
    if value < 0:
        raise ValueError('varint value must be non-negative, got {}'.format(value))
    out = bytearray()
    while value >= 0x80:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    out.append(value)
    return bytes(out)


def size(value: int) -> int:
    """Number of bytes ``encode(value)`` produces."""
    n = 1
    while value >= 0x80:
        value >>= 7
        n += 1
    return n


def decode(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint starting at ``offset``.
    Returns the value and the offset of the first byte after it.
    """
    value = 0
    shift = 0
    start = offset
    while offset < len(data):
        if offset - start == MAX_LENGTH:
            raise MalformedEncodingError('varint longer than {} bytes'.format(MAX_LENGTH), bytes(data))
        byte = data[offset]
        value |= (byte & 0x7F) << shift
        offset += 1
        if not byte & 0x80:
            return value, offset
        shift += 7
    raise MalformedEncodingError('data too short to hold a varint', bytes(data))


def read(stream: BinaryIO) -> int:
    """Read one varint off a binary stream, consuming only its bytes."""
    value = 0
    shift = 0
    for _ in range(MAX_LENGTH):
        chunk = stream.read(1)
        if not chunk:
            raise MalformedEncodingError('stream ended inside a varint')
        byte = chunk[0]
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value
        shift += 7
    raise MalformedEncodingError('varint longer than {} bytes'.format(MAX_LENGTH))
