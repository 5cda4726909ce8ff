"""
Digest providers: functions that hash content for a named algorithm, and
helpers that turn their output into multihashes.
"""

import hashlib
import io
import logging
from typing import Callable, Dict, List, Optional, Union

import nacl.hashlib

from .algorithms import DEFAULT_REGISTRY, AlgorithmRegistry
from .errors import InvalidAlgorithmError, UnsupportedAlgorithmError
from .types import Multihash

logger = logging.getLogger(__name__)

Content = Union[str, bytes, bytearray, memoryview, io.IOBase]
DigestProvider = Callable[[Content], bytes]

_READ_CHUNK = 1024


def _feed(hasher, content: Content) -> None:
    if isinstance(content, str):
        hasher.update(content.encode('utf-8'))
    elif isinstance(content, (bytes, bytearray, memoryview)):
        hasher.update(bytes(content))
    elif isinstance(content, io.IOBase):
        while True:
            chunk = content.read(_READ_CHUNK)
            if not chunk:
                break
            hasher.update(chunk)
    else:
        raise TypeError("Don't know how to compute digest from {}".format(type(content).__name__))


def hasher_provider(factory: Callable) -> DigestProvider:
    """
    Wrap a hashlib-style constructor (``update``/``digest``) as a provider.
    """

    def provider(content: Content) -> bytes:
        hasher = factory()
        _feed(hasher, content)
        return hasher.digest()

    return provider


class DigestRegistry:
    """Maps algorithm names to digest providers."""

    def __init__(self, providers: Optional[Dict[str, DigestProvider]] = None):
        self._providers: Dict[str, DigestProvider] = {}
        for name, provider in (providers or {}).items():
            self.register(name, provider)

    def register(self, name: str, provider: DigestProvider) -> None:
        logger.debug('Registering digest provider for %s', name)
        self._providers[name] = provider

    def get(self, name: str) -> DigestProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise UnsupportedAlgorithmError('No supported hashing function for algorithm {}'.format(name), name) from None

    @property
    def names(self) -> List[str]:
        return list(self._providers)

    def __contains__(self, name) -> bool:
        return name in self._providers


DEFAULT_DIGESTS = DigestRegistry(
    {
        'sha1': hasher_provider(hashlib.sha1),
        'sha2-256': hasher_provider(hashlib.sha256),
        'sha2-512': hasher_provider(hashlib.sha512),
        'sha3': hasher_provider(hashlib.sha3_512),
        'blake2b': hasher_provider(lambda: nacl.hashlib.blake2b(digest_size=64)),
        'blake2s': hasher_provider(hashlib.blake2s),
    }
)


def hash_content(
    algorithm: Union[str, int],
    content: Content,
    *,
    digests: Optional[DigestRegistry] = None,
    registry: Optional[AlgorithmRegistry] = None,
) -> Multihash:
    """Compute the digest of ``content`` and return it as a multihash."""
    if digests is None:
        digests = DEFAULT_DIGESTS
    if registry is None:
        registry = DEFAULT_REGISTRY
    entry = registry.lookup(algorithm)
    if entry is None:
        raise InvalidAlgorithmError(
            'Algorithm argument {!r} does not represent a valid hash algorithm.'.format(algorithm), algorithm
        )
    provider = digests.get(entry.name)
    return Multihash.create(entry.code, provider(content), registry=registry)


def _constructor(name: str) -> Callable[..., Multihash]:
    def construct(content: Content, *, digests: Optional[DigestRegistry] = None) -> Multihash:
        return hash_content(name, content, digests=digests)

    construct.__name__ = name.replace('-', '_')
    construct.__doc__ = 'Calculate the {} digest of a string, buffer or stream and return a multihash.'.format(name)
    return construct


sha1 = _constructor('sha1')
sha2_256 = _constructor('sha2-256')
sha2_512 = _constructor('sha2-512')
sha3 = _constructor('sha3')
blake2b = _constructor('blake2b')
blake2s = _constructor('blake2s')


def test(mhash: Optional[Multihash], content: Optional[Content], *, digests: Optional[DigestRegistry] = None):
    """
    Check whether ``content`` hashes to ``mhash``.

    Returns None if either argument is None. Raises
    UnsupportedAlgorithmError if no provider exists for the algorithm.
    """
    if mhash is None or content is None:
        return None
    if digests is None:
        digests = DEFAULT_DIGESTS
    provider = digests.get(mhash.algorithm)
    return provider(content) == mhash.digest
