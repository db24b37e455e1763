from concurrent.futures import Executor
from functools import partial
from typing import List, Optional

from xor_ripper.algorithm.hamming import hamming_distance_bits
from xor_ripper.log import get_logger
from xor_ripper.models.candidates import KeyLengthCandidate
from xor_ripper.utils import BytesLike, InsufficientDataError, _as_bytes

DEFAULT_MIN_KEY_LENGTH = 2
DEFAULT_MAX_KEY_LENGTH = 40

log = get_logger(__name__)


def score_key_length(ciphertext: bytes, key_length: int) -> Optional[KeyLengthCandidate]:
    """
    Mean normalized Hamming distance between the two halves of every full
    2*key_length block. Returns None when no full block fits.
    """
    block_size = 2 * key_length
    block_count = len(ciphertext) // block_size
    if block_count == 0:
        return None

    total = 0.0
    for i in range(block_count):
        block = ciphertext[i * block_size:(i + 1) * block_size]
        # Normalize per block so lengths of different sizes compare fairly.
        total += hamming_distance_bits(block[:key_length], block[key_length:]) / key_length

    return KeyLengthCandidate(length=key_length, score=total / block_count, blocks=block_count)


def rank_key_lengths(
    ciphertext: BytesLike,
    min_len: int = DEFAULT_MIN_KEY_LENGTH,
    max_len: int = DEFAULT_MAX_KEY_LENGTH,
    *,
    executor: Optional[Executor] = None,
) -> List[KeyLengthCandidate]:
    """
    Rank every key length in [min_len, max_len] from most to least plausible.
    Lengths too long to fill a single comparison block are left out.
    Ordering is ascending by (score, length), so ties go to the shorter key.
    """
    if min_len < 1:
        raise ValueError(f"min_len must be at least 1, got {min_len}")
    if min_len > max_len:
        raise ValueError(f"min_len ({min_len}) must not exceed max_len ({max_len})")

    ciphertext = _as_bytes(ciphertext)
    lengths = range(min_len, max_len + 1)
    score_fn = partial(score_key_length, ciphertext)

    if executor is None:
        results = map(score_fn, lengths)
    else:
        results = executor.map(score_fn, lengths)

    candidates = [c for c in results if c is not None]
    candidates.sort(key=lambda c: (c.score, c.length))

    for candidate in candidates:
        log.debug("key length scored", length=candidate.length, score=candidate.score, blocks=candidate.blocks)
    return candidates


def estimate_key_length(
    ciphertext: BytesLike,
    min_len: int = DEFAULT_MIN_KEY_LENGTH,
    max_len: int = DEFAULT_MAX_KEY_LENGTH,
    *,
    executor: Optional[Executor] = None,
) -> int:
    """Most plausible repeating-XOR key length for the ciphertext."""
    candidates = rank_key_lengths(ciphertext, min_len, max_len, executor=executor)
    if not candidates:
        raise InsufficientDataError(
            f"Ciphertext of {len(ciphertext)} bytes is too short for key lengths "
            f"{min_len}..{max_len} (need at least {2 * min_len} bytes)"
        )

    best = candidates[0]
    log.info("key length estimated", length=best.length, score=best.score)
    return best.length
