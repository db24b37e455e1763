from typing import Iterable, List, Optional, Tuple

from xor_ripper.log import get_logger
from xor_ripper.models.candidates import SingleByteCandidate
from xor_ripper.scoring import is_likely_english_text, score_text
from xor_ripper.utils import BytesLike, _as_bytes
from xor_ripper.xor import xor_single_byte

log = get_logger(__name__)


def rank_single_byte_keys(ciphertext: BytesLike, *, top_n: Optional[int] = None) -> List[SingleByteCandidate]:
    """
    Try all 256 single-byte keys and rank the decryptions by score_text.
    Best first; equal scores go to the larger key.
    """
    ciphertext = _as_bytes(ciphertext)
    results = []
    for key in range(256):
        plaintext = xor_single_byte(ciphertext, key)
        results.append(SingleByteCandidate(key=key, plaintext=plaintext, score=score_text(plaintext)))

    results.sort(key=lambda c: (c.score, c.key), reverse=True)
    if top_n is not None:
        return results[:top_n]
    return results


def find_english_single_byte(ciphertext: BytesLike) -> List[SingleByteCandidate]:
    """Every single-byte key whose decryption passes the English gate, in key order."""
    ciphertext = _as_bytes(ciphertext)
    hits = []
    for key in range(256):
        plaintext = xor_single_byte(ciphertext, key)
        if is_likely_english_text(plaintext):
            hits.append(SingleByteCandidate(key=key, plaintext=plaintext, score=score_text(plaintext)))
    return hits


def detect_single_byte_xor(ciphertexts: Iterable[BytesLike]) -> List[Tuple[int, SingleByteCandidate]]:
    """
    Search many ciphertexts for the ones that are single-byte XORed English.
    Returns (index, candidate) for every hit.
    """
    found = []
    for index, ciphertext in enumerate(ciphertexts):
        for candidate in find_english_single_byte(ciphertext):
            log.info("single-byte xor hit", index=index, key=candidate.key, score=candidate.score)
            found.append((index, candidate))
    return found
