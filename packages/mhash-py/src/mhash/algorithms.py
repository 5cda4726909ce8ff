"""Hash algorithm names and their multihash codes."""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .errors import InvalidAlgorithmError

APP_CODE_MIN = 0x01
APP_CODE_MAX = 0x0F


@dataclass(frozen=True)
class AlgorithmEntry:
    code: int
    name: str
    length: Optional[int] = None  # natural digest size in bytes
    system: Optional[str] = None  # hashlib name


def is_app_code(code) -> Optional[bool]:
    """
    Check whether a code is in the application-specific range 0x01-0x0F.
    Returns None for values that are not integers at all.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return APP_CODE_MIN <= code <= APP_CODE_MAX


class AlgorithmRegistry:
    """
    Table of known hash algorithms, looked up by name or by code.

    Registries are built once at start-up and only read afterwards.
    """

    def __init__(self, entries: Iterable[AlgorithmEntry] = ()):
        self._by_name: Dict[str, AlgorithmEntry] = {}
        self._by_code: Dict[int, AlgorithmEntry] = {}
        for entry in entries:
            self.register(entry)

    def register(self, entry: AlgorithmEntry) -> None:
        if is_app_code(entry.code) is not False or entry.code < 1:
            raise InvalidAlgorithmError(
                'Algorithm code {!r} is reserved or not a valid code'.format(entry.code), entry.code
            )
        if entry.name in self._by_name:
            raise InvalidAlgorithmError('Algorithm {} is already registered'.format(entry.name), entry.name)
        if entry.code in self._by_code:
            raise InvalidAlgorithmError('Algorithm code 0x{:02x} is already registered'.format(entry.code), entry.code)
        self._by_name[entry.name] = entry
        self._by_code[entry.code] = entry

    def lookup(self, value: Union[str, int]) -> Optional[AlgorithmEntry]:
        """
        Find an algorithm by name or numeric code. App-specific codes resolve
        to a synthesized ``app-<code>`` entry. Returns None if nothing matches.
        """
        if isinstance(value, str):
            return self._by_name.get(value)
        app = is_app_code(value)
        if app is None:
            return None
        if app:
            return AlgorithmEntry(code=value, name='app-{}'.format(value))
        return self._by_code.get(value)

    @property
    def names(self) -> List[str]:
        return list(self._by_name)

    @property
    def codes(self) -> List[int]:
        return list(self._by_code)

    def __contains__(self, value) -> bool:
        return self.lookup(value) is not None

    def __iter__(self) -> Iterator[AlgorithmEntry]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


DEFAULT_ALGORITHMS = (
    AlgorithmEntry(code=0x11, name='sha1', length=20, system='sha1'),
    AlgorithmEntry(code=0x12, name='sha2-256', length=32, system='sha256'),
    AlgorithmEntry(code=0x13, name='sha2-512', length=64, system='sha512'),
    AlgorithmEntry(code=0x14, name='sha3', length=64, system='sha3_512'),
    AlgorithmEntry(code=0x40, name='blake2b', length=64, system='blake2b'),
    AlgorithmEntry(code=0x41, name='blake2s', length=32, system='blake2s'),
)

DEFAULT_REGISTRY = AlgorithmRegistry(DEFAULT_ALGORITHMS)
