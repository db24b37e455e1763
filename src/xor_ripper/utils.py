import base64
import binascii
import re
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_B64_RE = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")
_B64_URLSAFE_RE = re.compile(r"(?:[A-Za-z0-9\-_]{4})*(?:[A-Za-z0-9\-_]{2}==|[A-Za-z0-9\-_]{3}=)?")


class XorRipperError(ValueError):
    pass

class LengthMismatchError(XorRipperError):
    pass

class InvalidEncodingError(XorRipperError):
    pass

class InsufficientDataError(XorRipperError):
    pass


def _as_bytes(
    data: Union[str, BytesLike],
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Normalize values to type bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise TypeError(f"Expected str or bytes-like, got {type(data).__name__}")


def _as_text(data: Union[str, BytesLike]) -> str:
    """Encoded input may arrive as str or as ASCII bytes."""
    if isinstance(data, str):
        return data
    try:
        return _as_bytes(data).decode("ascii")
    except UnicodeDecodeError as err:
        raise InvalidEncodingError("Encoded input contains non-ASCII bytes") from err


def hex_encode(data: BytesLike) -> str:
    """Lowercase hex string of the given bytes."""
    return _as_bytes(data).hex()


def hex_decode(hex_text: Union[str, BytesLike]) -> bytes:
    """Strict hex decode: even length, hex digits only, no separators."""
    text = _as_text(hex_text)
    if len(text) % 2:
        raise InvalidEncodingError(f"Hex string has odd length: {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise InvalidEncodingError("Hex string contains non-hex characters")
    return bytes.fromhex(text)


def b64_encode(
    data: Union[str, BytesLike],
    *,
    urlsafe: bool = False,
    text_encoding: str = "utf-8",
) -> str:
    """Accepts str/bytes/etc and return a base64 string (standard or URL-safe)."""
    raw = _as_bytes(data, encoding=text_encoding)
    fn = base64.urlsafe_b64encode if urlsafe else base64.b64encode
    return fn(raw).decode("ascii")


def b64_decode(
    b64_text: Union[str, BytesLike],
    *,
    urlsafe: bool = False,
) -> bytes:
    """
    Strict RFC 4648 decode. Padding is required, and any character outside the
    selected alphabet (whitespace included) is rejected.
    """
    text = _as_text(b64_text)
    if len(text) % 4:
        raise InvalidEncodingError(f"Base64 length {len(text)} is not a multiple of 4")

    pattern = _B64_URLSAFE_RE if urlsafe else _B64_RE
    if not pattern.fullmatch(text):
        raise InvalidEncodingError("Base64 string has invalid characters or malformed padding")

    try:
        if urlsafe:
            return base64.urlsafe_b64decode(text)
        return base64.b64decode(text, validate=True)
    except binascii.Error as err:
        raise InvalidEncodingError(str(err)) from err


def hex_to_b64(hex_text: Union[str, BytesLike]) -> str:
    """Re-encode a hex string as standard base64."""
    return b64_encode(hex_decode(hex_text))


def b64_to_hex(b64_text: Union[str, BytesLike]) -> str:
    """Re-encode a standard base64 string as hex."""
    return hex_encode(b64_decode(b64_text))
