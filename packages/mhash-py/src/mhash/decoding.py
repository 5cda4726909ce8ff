import io
import logging
from typing import BinaryIO, Optional, Union

from . import base58, codec
from . import hex as hexcodec
from .algorithms import AlgorithmRegistry
from .types import Multihash

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, str, BinaryIO]


def decode(
    source: Source,
    *,
    registry: Optional[AlgorithmRegistry] = None,
    max_length: Optional[int] = None,
) -> Multihash:
    """
    Decode a multihash from a byte buffer, a string or a binary stream.

    Strings that are well-formed hex are decoded as hex; any other string is
    decoded as Base58. A string that is valid in both forms is read as hex.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return codec.decode(source, registry=registry, max_length=max_length)

    if isinstance(source, str):
        if hexcodec.is_valid(source):
            logger.debug('Decoding multihash string %r as hex', source)
            data = hexcodec.decode(source)
        else:
            logger.debug('Decoding multihash string %r as base58', source)
            data = base58.decode(source)
        return codec.decode(data, registry=registry, max_length=max_length)

    if isinstance(source, io.TextIOBase):
        raise TypeError('Cannot decode a multihash from a text stream; open it in binary mode')

    if isinstance(source, io.IOBase):
        return codec.read(source, registry=registry, max_length=max_length)

    raise TypeError('Cannot decode a multihash from {}'.format(type(source).__name__))
