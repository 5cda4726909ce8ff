from .types import Multihash, create
from .algorithms import AlgorithmEntry, AlgorithmRegistry, DEFAULT_REGISTRY, is_app_code
from .codec import encode, encode_hex, encode_b58, read, is_valid
from .decoding import decode
from .digest import DigestRegistry, DEFAULT_DIGESTS, hash_content
from .select import select
from .errors import (
    MultihashError,
    InvalidAlgorithmError,
    InvalidDigestError,
    MalformedEncodingError,
    InvalidCharacterError,
    UnsupportedAlgorithmError,
)

__all__ = [
    'Multihash',
    'create',
    'AlgorithmEntry',
    'AlgorithmRegistry',
    'DEFAULT_REGISTRY',
    'is_app_code',
    'encode',
    'encode_hex',
    'encode_b58',
    'decode',
    'read',
    'is_valid',
    'DigestRegistry',
    'DEFAULT_DIGESTS',
    'hash_content',
    'select',
    'MultihashError',
    'InvalidAlgorithmError',
    'InvalidDigestError',
    'MalformedEncodingError',
    'InvalidCharacterError',
    'UnsupportedAlgorithmError',
]
