from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class KeyLengthCandidate:
    """A candidate key length and its mean normalized Hamming distance. Lower is better."""

    length: int
    score: float
    blocks: int = 0


@dataclass(frozen=True, slots=True)
class ScoredByteChoice:
    """A printable key byte guess for one key position and its plaintext score."""

    byte: int
    score: float


@dataclass(frozen=True, slots=True)
class SingleByteCandidate:
    key: int
    plaintext: bytes
    score: float


@dataclass(frozen=True, slots=True)
class BreakResult:
    """Outcome of breaking a repeating-key XOR ciphertext end to end."""

    key: bytes
    plaintext: bytes
    key_length_candidates: Tuple[KeyLengthCandidate, ...] = field(default_factory=tuple)

    @property
    def key_length(self) -> int:
        return len(self.key)
