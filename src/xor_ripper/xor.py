from itertools import cycle
from typing import Union

from xor_ripper.utils import (
    BytesLike,
    LengthMismatchError,
    _as_bytes,
    hex_decode,
    hex_encode,
)


def xor_fixed(a: BytesLike, b: BytesLike) -> bytes:
    """XOR two equal-length byte strings."""
    a, b = _as_bytes(a), _as_bytes(b)
    if len(a) != len(b):
        raise LengthMismatchError(f"Operands differ in length: {len(a)} != {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def xor_single_byte(data: BytesLike, key: int) -> bytes:
    """XOR every byte with the same key byte."""
    if not 0 <= key <= 0xFF:
        raise ValueError(f"Key byte out of range: {key}")
    return bytes(b ^ key for b in _as_bytes(data))


def xor_repeating(data: BytesLike, key: BytesLike) -> bytes:
    """XOR with the key repeated cyclically over the data. Encrypts and decrypts."""
    key = _as_bytes(key)
    if not key:
        raise ValueError("Repeating XOR key must not be empty")
    return bytes(b ^ k for b, k in zip(_as_bytes(data), cycle(key)))


def xor_hex(a_hex: Union[str, bytes], b_hex: Union[str, bytes]) -> str:
    """Fixed XOR of two hex strings, returned as hex."""
    return hex_encode(xor_fixed(hex_decode(a_hex), hex_decode(b_hex)))
