"""UTF-8 text conversion and debug logging."""

from __future__ import annotations

import logging

_logger = logging.getLogger("enginecore")


def encode_utf8(text: str) -> bytes:
    """Encode text as UTF-8; unpaired surrogates become U+FFFD."""
    if not text:
        return b""
    cleaned = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return cleaned.encode("utf-8")


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes; invalid sequences become U+FFFD."""
    if not data:
        return ""
    return bytes(data).decode("utf-8", "replace")


def log(message: str) -> None:
    """Write a message to the debug log."""
    _logger.debug(message)