import string

from xor_ripper.utils import BytesLike, _as_bytes

# Bytes counted as "plaintext-like" by score_text.
SCORED_BYTES = frozenset((string.ascii_letters + string.digits + " ").encode("ascii"))

MIN_LETTER_RATIO = 0.70
MAX_SPACE_RATIO = 0.20
MAX_SYMBOL_RATIO = 0.10


def score_text(data: BytesLike) -> float:
    """
    Percentage of bytes that are ASCII letters, digits or the space character.
    Higher means more English-like. Empty input scores 0.
    """
    data = _as_bytes(data)
    if not data:
        return 0.0
    hits = sum(1 for b in data if b in SCORED_BYTES)
    return 100.0 * hits / len(data)


def is_likely_english_text(data: BytesLike) -> bool:
    """
    Stricter yes/no gate over the lossily decoded text.

    Accepts only when letters make up at least 70% of the characters,
    whitespace at most 20%, and everything else at most 10%.
    """
    text = _as_bytes(data).decode("utf-8", errors="replace")
    if not text:
        return False

    total = len(text)
    letter_ratio = sum(1 for ch in text if ch.isalpha()) / total
    space_ratio = sum(1 for ch in text if ch.isspace()) / total
    symbol_ratio = 1.0 - letter_ratio - space_ratio

    return (
        letter_ratio >= MIN_LETTER_RATIO
        and space_ratio <= MAX_SPACE_RATIO
        and symbol_ratio <= MAX_SYMBOL_RATIO
    )


def character_frequency(data: BytesLike) -> dict[int, int]:
    """Occurrences of each byte value, keyed in first-seen order."""
    counts: dict[int, int] = {}
    for b in _as_bytes(data):
        counts[b] = counts.get(b, 0) + 1
    return counts
