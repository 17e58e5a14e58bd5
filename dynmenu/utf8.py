"""Lenient UTF-8 decoding that substitutes invalid sequences."""

from __future__ import annotations

from collections.abc import Iterator

from .util import between

__all__ = [
    "UTF_INVALID",
    "UTF_SIZ",
    "decode_byte",
    "validate",
    "decode",
    "iter_codepoints",
]

UTF_INVALID = 0xFFFD
UTF_SIZ = 4

_UTF_BYTE = (0x80, 0x00, 0xC0, 0xE0, 0xF0)
_UTF_MASK = (0xC0, 0x80, 0xE0, 0xF0, 0xF8)
_UTF_MIN = (0, 0, 0x80, 0x800, 0x10000)
_UTF_MAX = (0x10FFFF, 0x7F, 0x7FF, 0xFFFF, 0x10FFFF)


def decode_byte(byte: int) -> tuple[int, int]:
    """Classify one byte.

    Returns ``(payload, kind)`` where ``kind`` is 0 for a continuation byte,
    1 to 4 for the lead byte of a sequence of that length, and 5 for a byte
    that can appear nowhere in UTF-8 (payload 0).
    """
    for kind, (mask, lead) in enumerate(zip(_UTF_MASK, _UTF_BYTE)):
        if byte & mask == lead:
            return byte & ~mask & 0xFF, kind
    return 0, UTF_SIZ + 1


def validate(codepoint: int, length: int) -> tuple[int, int]:
    """Check a decoded code point against its sequence length.

    Overlong forms, surrogates and out-of-range values become
    :data:`UTF_INVALID`.  Returns the code point and the number of bytes
    its shortest encoding takes.
    """
    if not between(codepoint, _UTF_MIN[length], _UTF_MAX[length]) or between(
        codepoint, 0xD800, 0xDFFF
    ):
        codepoint = UTF_INVALID
    size = 1
    while codepoint > _UTF_MAX[size]:
        size += 1
    return codepoint, size


def decode(data: bytes) -> tuple[int, int]:
    """Decode the first code point of ``data``.

    Returns ``(codepoint, consumed)``.  At most four bytes are looked at.
    A sequence cut short by the end of ``data`` consumes nothing.
    """
    data = data[:UTF_SIZ]
    if not data:
        return UTF_INVALID, 0
    decoded, length = decode_byte(data[0])
    if not between(length, 1, UTF_SIZ):
        return UTF_INVALID, 1
    consumed = 1
    for byte in data[1:length]:
        payload, kind = decode_byte(byte)
        if kind:
            return UTF_INVALID, consumed
        decoded = (decoded << 6) | payload
        consumed += 1
    if consumed < length:
        return UTF_INVALID, 0
    codepoint, _ = validate(decoded, length)
    return codepoint, length


def iter_codepoints(data: bytes) -> Iterator[int]:
    """Yield every code point of ``data``, invalid ones as :data:`UTF_INVALID`."""
    pos = 0
    while pos < len(data):
        codepoint, consumed = decode(data[pos : pos + UTF_SIZ])
        if consumed == 0:
            # A sequence truncated by the end of the data.
            consumed = len(data) - pos
        yield codepoint
        pos += consumed