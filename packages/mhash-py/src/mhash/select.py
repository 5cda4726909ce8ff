from typing import Iterable, List, Optional, Union

from .codec import encode_hex
from .types import Multihash


def select(
    multihashes: Iterable[Multihash],
    *,
    algorithm: Optional[Union[str, int]] = None,
    prefix: Optional[str] = None,
    after: Optional[Multihash] = None,
) -> List[Multihash]:
    """
    Filter multihashes, keeping input order. Every given option must match:

    - ``algorithm``: name or code of the algorithm
    - ``prefix``: leading characters of the hex-encoded multihash
    - ``after``: only values that sort strictly after this one
    """
    if prefix is not None:
        prefix = prefix.lower()

    def matches(mhash: Multihash) -> bool:
        if algorithm is not None and algorithm not in (mhash.algorithm, mhash.code):
            return False
        if prefix is not None and not encode_hex(mhash).startswith(prefix):
            return False
        if after is not None and not mhash > after:
            return False
        return True

    return [mhash for mhash in multihashes if matches(mhash)]
