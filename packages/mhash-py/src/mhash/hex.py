"""Lowercase hexadecimal encoding of byte strings."""

import re
from typing import Optional

from .errors import InvalidDigestError

_HEX_RE = re.compile(r'[0-9a-fA-F]*')


def encode(data: bytes) -> str:
    return bytes(data).hex()


def decode(text: str) -> bytes:
    """
    Parse a hex string into exactly ``len(text) // 2`` bytes.
    Leading zero bytes are kept.
    """
    if len(text) % 2:
        raise InvalidDigestError(
            "Input string '{}' is not valid hex: number of characters ({}) is odd".format(text, len(text)), text
        )
    if not _HEX_RE.fullmatch(text):
        raise InvalidDigestError("Input string '{}' is not valid hex: contains illegal characters".format(text), text)
    return bytes.fromhex(text)


def validate(text, max_length: Optional[int] = None) -> Optional[str]:
    """
    Check that a value is a well-formed hex digest of at least one byte.
    Returns an error message, or None if the value is valid.
    ``max_length`` is in bytes.
    """
    if not isinstance(text, str):
        return 'Value is not a string: {!r}'.format(text)
    if not _HEX_RE.fullmatch(text):
        return "String '{}' is not a valid digest: contains illegal characters".format(text)
    if len(text) < 2:
        return 'Digest must contain at least one byte'
    if max_length is not None and len(text) > 2 * max_length:
        return 'Digest exceeds maximum supported length of {}: {}'.format(max_length, len(text) // 2)
    if len(text) % 2:
        return "String '{}' is not a valid digest: number of characters ({}) is odd".format(text, len(text))
    return None


def is_valid(text, max_length: Optional[int] = None) -> bool:
    return validate(text, max_length) is None
