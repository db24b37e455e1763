from concurrent.futures import Executor
from functools import partial
from typing import List, Optional

from xor_ripper.algorithm.key_length import (
    DEFAULT_MAX_KEY_LENGTH,
    DEFAULT_MIN_KEY_LENGTH,
    rank_key_lengths,
)
from xor_ripper.log import get_logger
from xor_ripper.models.candidates import BreakResult, ScoredByteChoice
from xor_ripper.scoring import score_text
from xor_ripper.utils import BytesLike, InsufficientDataError, _as_bytes
from xor_ripper.xor import xor_repeating, xor_single_byte

# Key bytes are assumed to be printable ASCII.
PRINTABLE_KEY_BYTES = range(32, 127)

log = get_logger(__name__)


def column_stream(ciphertext: BytesLike, key_length: int, position: int) -> bytes:
    """Every byte that was XORed with key byte `position` under a key of `key_length`."""
    if key_length < 1:
        raise ValueError(f"key_length must be at least 1, got {key_length}")
    if not 0 <= position < key_length:
        raise ValueError(f"position must be in 0..{key_length - 1}, got {position}")
    return _as_bytes(ciphertext)[position::key_length]


def rank_key_bytes(column: BytesLike) -> List[ScoredByteChoice]:
    """Score every printable key byte against the column, best first."""
    column = _as_bytes(column)
    choices = [ScoredByteChoice(byte=c, score=score_text(xor_single_byte(column, c))) for c in PRINTABLE_KEY_BYTES]
    choices.sort(key=lambda choice: (choice.score, choice.byte), reverse=True)
    return choices


def best_key_byte(column: BytesLike) -> ScoredByteChoice:
    """
    The printable key byte whose decryption of the column scores highest.
    Equal scores resolve to the numerically largest byte.
    """
    return rank_key_bytes(column)[0]


def _recover_position(ciphertext: bytes, key_length: int, position: int) -> ScoredByteChoice:
    return best_key_byte(column_stream(ciphertext, key_length, position))


def recover_key(
    ciphertext: BytesLike,
    key_length: int,
    *,
    executor: Optional[Executor] = None,
) -> bytes:
    """
    Rebuild a repeating-XOR key of the given length, one byte per position.

    Positions beyond the end of the ciphertext have empty columns; they still
    yield a byte (with score 0) so the result always has key_length bytes.
    """
    if key_length < 1:
        raise ValueError(f"key_length must be at least 1, got {key_length}")

    ciphertext = _as_bytes(ciphertext)
    position_fn = partial(_recover_position, ciphertext, key_length)
    positions = range(key_length)

    if executor is None:
        choices = list(map(position_fn, positions))
    else:
        choices = list(executor.map(position_fn, positions))

    for position, choice in enumerate(choices):
        log.debug("key byte recovered", position=position, byte=choice.byte, score=choice.score)

    key = bytes(choice.byte for choice in choices)
    log.info("key recovered", key_length=key_length, key_hex=key.hex())
    return key


def break_repeating_key_xor(
    ciphertext: BytesLike,
    min_len: int = DEFAULT_MIN_KEY_LENGTH,
    max_len: int = DEFAULT_MAX_KEY_LENGTH,
    *,
    executor: Optional[Executor] = None,
) -> BreakResult:
    """Estimate the key length, recover the key and decrypt."""
    ciphertext = _as_bytes(ciphertext)
    candidates = rank_key_lengths(ciphertext, min_len, max_len, executor=executor)
    if not candidates:
        raise InsufficientDataError(
            f"Ciphertext of {len(ciphertext)} bytes is too short for key lengths {min_len}..{max_len}"
        )

    key = recover_key(ciphertext, candidates[0].length, executor=executor)
    return BreakResult(
        key=key,
        plaintext=xor_repeating(ciphertext, key),
        key_length_candidates=tuple(candidates),
    )
