from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from . import hex as hexcodec
from .algorithms import DEFAULT_REGISTRY, AlgorithmRegistry, is_app_code
from .config import resolve_max_length
from .errors import InvalidAlgorithmError, InvalidDigestError

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _empty_metadata() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, order=True)
class Multihash:
    """
    A hash digest tagged with the code of the algorithm that produced it.

    Equality, ordering and hashing use ``code`` then ``digest`` only;
    ``algorithm`` is derived from the code (codes in the default
    registry always carry their registered name) and ``metadata`` is opaque
    caller data. Build values with :meth:`create`.
    """

    code: int
    digest: bytes
    algorithm: str = field(default='', compare=False)
    metadata: Mapping[str, Any] = field(default_factory=_empty_metadata, compare=False, repr=False)

    def __post_init__(self):
        if is_app_code(self.code) is None or self.code < 1:
            raise InvalidAlgorithmError('Algorithm code {!r} is not a valid code'.format(self.code), self.code)
        known = DEFAULT_REGISTRY.lookup(self.code)
        if not self.algorithm:
            if known is None:
                raise InvalidAlgorithmError('Algorithm code 0x{:02x} has no known name'.format(self.code), self.code)
            object.__setattr__(self, 'algorithm', known.name)
        elif known is not None and known.name != self.algorithm:
            raise InvalidAlgorithmError(
                'Algorithm {!r} does not match code 0x{:02x} ({})'.format(self.algorithm, self.code, known.name),
                self.algorithm,
            )
        if not isinstance(self.digest, bytes) or not self.digest:
            raise InvalidDigestError('Digest must be a non-empty bytes object', self.digest)

    @classmethod
    def create(
        cls,
        algorithm: Union[str, int],
        digest: Union[bytes, bytearray, memoryview, str],
        *,
        registry: Optional[AlgorithmRegistry] = None,
        max_length: Optional[int] = None,
    ) -> 'Multihash':
        """
        Construct a multihash from an algorithm name or code and a digest
        given as raw bytes or as a hex string.
        """
        if registry is None:
            registry = DEFAULT_REGISTRY
        entry = registry.lookup(algorithm)
        if entry is None:
            raise InvalidAlgorithmError(
                'Algorithm argument {!r} does not represent a valid hash algorithm.'.format(algorithm), algorithm
            )
        data = _coerce_digest(digest, resolve_max_length(max_length))
        return cls(code=entry.code, digest=data, algorithm=entry.name)

    @property
    def length(self) -> int:
        return len(self.digest)

    @property
    def hex_digest(self) -> str:
        return hexcodec.encode(self.digest)

    def with_metadata(self, metadata: Mapping[str, Any]) -> 'Multihash':
        """Return an equal multihash carrying ``metadata``."""
        return replace(self, metadata=MappingProxyType(dict(metadata)))

    def encode(self) -> bytes:
        from .codec import encode

        return encode(self)

    def hex(self) -> str:
        from .codec import encode_hex

        return encode_hex(self)

    def b58(self) -> str:
        from .codec import encode_b58

        return encode_b58(self)

    def __str__(self) -> str:
        return 'hash:{}:{}'.format(self.algorithm, self.hex_digest)


def _coerce_digest(digest, max_length: Optional[int]) -> bytes:
    if isinstance(digest, str):
        error = hexcodec.validate(digest, max_length)
        if error is not None:
            raise InvalidDigestError(error, digest)
        return hexcodec.decode(digest)
    if isinstance(digest, _BYTES_LIKE):
        data = bytes(digest)
        if not data:
            raise InvalidDigestError('Digest must contain at least one byte', data)
        if max_length is not None and len(data) > max_length:
            raise InvalidDigestError(
                'Digest exceeds maximum supported length of {}: {}'.format(max_length, len(data)), data
            )
        return data
    raise InvalidDigestError('Digest must be bytes or a hex string, not {}'.format(type(digest).__name__), digest)


def create(algorithm, digest, *, registry=None, max_length=None) -> Multihash:
    return Multihash.create(algorithm, digest, registry=registry, max_length=max_length)
