"""
Binary multihash wire format: ``varint(code) || varint(length) || digest``.
"""

from typing import BinaryIO, Optional

from . import base58, varint
from . import hex as hexcodec
from .algorithms import AlgorithmRegistry
from .config import resolve_max_length
from .errors import InvalidDigestError, MalformedEncodingError, MultihashError
from .types import Multihash

# One code byte, one length byte and at least one digest byte.
MIN_ENCODED_LENGTH = 3

_READ_CHUNK = 1024


def encode(mhash: Multihash) -> bytes:
    """Encode a multihash into its binary representation."""
    return varint.encode(mhash.code) + varint.encode(mhash.length) + mhash.digest


def encoded_length(mhash: Multihash) -> int:
    return varint.size(mhash.code) + varint.size(mhash.length) + mhash.length


def encode_hex(mhash: Multihash) -> str:
    """Encode a multihash into a hexadecimal string."""
    return hexcodec.encode(encode(mhash))


def encode_b58(mhash: Multihash) -> str:
    """Encode a multihash into a Base58 string."""
    return base58.encode(encode(mhash))


def decode(
    data: bytes,
    *,
    registry: Optional[AlgorithmRegistry] = None,
    max_length: Optional[int] = None,
) -> Multihash:
    """
    Decode a multihash from the front of a byte buffer.

    Bytes following the digest are ignored, so a multihash can be read out
    of a larger buffer.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('multihash should be bytes, not {}'.format(type(data).__name__))
    data = bytes(data)
    if len(data) < MIN_ENCODED_LENGTH:
        raise MalformedEncodingError(
            'Encoded multihash must contain at least {} bytes, got {}'.format(MIN_ENCODED_LENGTH, len(data)), data
        )

    code, offset = varint.decode(data)
    length, offset = varint.decode(data, offset)
    if length < 1:
        raise MalformedEncodingError('Encoded digest length must be positive, got {}'.format(length), data)

    payload = len(data) - offset
    if payload < length:
        raise MalformedEncodingError(
            'Encoded digest length {} exceeds actual digest payload of {} bytes'.format(length, payload), data
        )

    return Multihash.create(code, data[offset : offset + length], registry=registry, max_length=max_length)


def read(
    stream: BinaryIO,
    *,
    registry: Optional[AlgorithmRegistry] = None,
    max_length: Optional[int] = None,
) -> Multihash:
    """
    Read one multihash off a binary stream, leaving the stream positioned
    directly after it.
    """
    code = varint.read(stream)
    length = varint.read(stream)
    if length < 1:
        raise MalformedEncodingError('Encoded digest length must be positive, got {}'.format(length), length)
    limit = resolve_max_length(max_length)
    if limit is not None and length > limit:
        raise InvalidDigestError('Digest exceeds maximum supported length of {}: {}'.format(limit, length), length)

    digest = bytearray()
    while len(digest) < length:
        chunk = stream.read(min(length - len(digest), _READ_CHUNK))
        if not chunk:
            raise MalformedEncodingError(
                'Stream ended after {} of {} digest bytes'.format(len(digest), length), bytes(digest)
            )
        digest.extend(chunk)

    return Multihash.create(code, bytes(digest), registry=registry, max_length=max_length)


def is_valid(data: bytes, *, registry: Optional[AlgorithmRegistry] = None) -> bool:
    """Check whether a buffer starts with a decodable multihash."""
    try:
        decode(data, registry=registry)
        return True
    except (MultihashError, TypeError):
        return False
