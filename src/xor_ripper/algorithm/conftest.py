import pytest

from xor_ripper.xor import xor_repeating

ENGLISH_PLAINTEXT = (
    b"Cryptography historically concerned itself with hiding written messages from curious strangers. "
    b"Classical ciphers replaced or shuffled letters, and careful analysts eventually learned to recognise "
    b"the statistical fingerprints those substitutions left behind. "
    b"Repeating key encryption combines every plaintext character with a short secret phrase, "
    b"cycling through that phrase until the message ends. "
    b"Because the phrase repeats, characters separated by"
)


@pytest.fixture
def english_plaintext() -> bytes:
    return ENGLISH_PLAINTEXT


@pytest.fixture
def ice_ciphertext() -> bytes:
    return xor_repeating(ENGLISH_PLAINTEXT, b"ICE")
