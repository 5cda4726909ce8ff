"""Exceptions raised by multihash construction and decoding."""

from typing import Any


class MultihashError(ValueError):
    """Base class for multihash errors. ``value`` holds the offending input."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidAlgorithmError(MultihashError):
    """Raised when an algorithm name or code does not resolve in the registry."""

    pass


class InvalidDigestError(MultihashError):
    """Raised when a digest is missing, empty, malformed hex or too long."""

    pass


class MalformedEncodingError(MultihashError):
    """Raised when a binary multihash is truncated or declares a bad length."""

    pass


class InvalidCharacterError(MultihashError):
    """Raised when Base58 input contains a character outside the alphabet."""

    pass


class UnsupportedAlgorithmError(MultihashError):
    """Raised when no digest provider is registered for an algorithm."""

    pass
