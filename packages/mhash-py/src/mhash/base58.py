"""Base58 encoding with the Bitcoin alphabet."""

from .errors import InvalidCharacterError

ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
_INDEX = {c: i for i, c in enumerate(ALPHABET)}
_ZERO = ALPHABET[0]


def encode(data: bytes) -> str:
    data = bytes(data)
    # Count leading zeros
    zeros = len(data) - len(data.lstrip(b'\x00'))
    num = int.from_bytes(data, 'big')
    enc = []
    while num > 0:
        num, rem = divmod(num, 58)
        enc.append(ALPHABET[rem])
    # Add leading '1's for zeros
    enc.extend(_ZERO * zeros)
    enc.reverse()
    return ''.join(enc)


def decode(text: str) -> bytes:
    zeros = len(text) - len(text.lstrip(_ZERO))
    if zeros == len(text):
        return b'\x00' * zeros
    num = 0
    for c in text[zeros:]:
        try:
            num = num * 58 + _INDEX[c]
        except KeyError:
            raise InvalidCharacterError("Invalid character: '{}' is not in Base58 alphabet".format(c), c) from None
    # Unsigned conversion, so there is never a sign byte to strip.
    return b'\x00' * zeros + num.to_bytes((num.bit_length() + 7) // 8, 'big')
