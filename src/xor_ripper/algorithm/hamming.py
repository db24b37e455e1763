from typing import Union

from xor_ripper.utils import BytesLike, LengthMismatchError, _as_bytes


def _check_lengths(a, b, strict: bool) -> None:
    if strict and len(a) != len(b):
        raise LengthMismatchError(f"Operands differ in length: {len(a)} != {len(b)}")


def hamming_distance_bits(a: BytesLike, b: BytesLike, *, strict: bool = False) -> int:
    """
    Count the differing bits between two byte strings.

    Unequal lengths are compared only up to the shorter one, unless strict is set,
    in which case a LengthMismatchError is raised.
    """
    a, b = _as_bytes(a), _as_bytes(b)
    _check_lengths(a, b, strict)
    return sum((x ^ y).bit_count() for x, y in zip(a, b))


def hamming_distance_chars(
    a: Union[str, BytesLike],
    b: Union[str, BytesLike],
    *,
    strict: bool = False,
) -> int:
    """Count the positions where two strings hold different characters (or bytes)."""
    if not (isinstance(a, str) and isinstance(b, str)):
        a, b = _as_bytes(a), _as_bytes(b)
    _check_lengths(a, b, strict)
    return sum(1 for x, y in zip(a, b) if x != y)
