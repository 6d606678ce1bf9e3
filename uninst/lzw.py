"""Decompression of Unix 'compress' (LZW) data stored in image files."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from .cksum import cksum_update

__all__ = [
    "LzwError",
    "LzwDataError",
    "LzwBufferError",
    "unlzwpipe",
    "decompress",
]

_OUT_SIZE = 32768


class LzwError(ValueError):
    """Compressed data could not be decoded."""


class LzwDataError(LzwError):
    """The compressed stream holds invalid data."""


class LzwBufferError(LzwError):
    """The compressed stream ends in the middle of a header or code."""


class _Input:
    """Byte cursor over the compressed data."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def next(self) -> int:
        """Return the next byte, or -1 at the end of the data."""
        if self._pos >= len(self._data):
            return -1
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def skip(self, count: int) -> None:
        self._pos = min(self._pos + count, len(self._data))


def _decode(data: bytes) -> Iterator[bytes]:
    """Yield decompressed chunks of ``data``, which starts with the magic bytes."""
    inp = _Input(data)
    # The two magic bytes are skipped without being checked.
    inp.next()
    inp.next()

    flags = inp.next()
    if flags == -1:
        raise LzwBufferError("truncated lzw header")
    if flags & 0x60:
        raise LzwDataError("unknown lzw flags set")
    max_bits = flags & 0x1F
    if not 9 <= max_bits <= 16:
        raise LzwDataError("lzw bits out of range")
    if max_bits == 9:
        max_bits = 10
    block = bool(flags & 0x80)

    bits = 9
    mask = 0x1FF
    end = 256 if block else 255

    last = inp.next()
    if last == -1:
        return
    final = prev = last
    last = inp.next()
    if last == -1:
        raise LzwBufferError("lzw data ends inside the first code")
    if last & 1:
        raise LzwDataError("invalid lzw code")
    rem = last >> 1
    left = 7
    chunk = bits - 2
    out = bytearray([final])

    prefix = [0] * 65536
    suffix = bytearray(65536)

    while True:
        if end >= mask and bits < max_bits:
            # Codes are written in groups; a width change discards the rest
            # of the current group.
            left = rem = 0
            inp.skip(chunk)
            chunk = 0
            bits += 1
            mask = (mask << 1) | 1

        if chunk == 0:
            chunk = bits
        code = rem
        last = inp.next()
        if last == -1:
            if out:
                yield bytes(out)
            return
        code += last << left
        left += 8
        chunk -= 1
        if bits > left:
            last = inp.next()
            if last == -1:
                raise LzwBufferError("lzw data ends inside a code")
            code += last << left
            left += 8
            chunk -= 1
        code &= mask
        left -= bits
        rem = last >> (8 - left)

        if code == 256 and block:
            left = rem = 0
            inp.skip(chunk)
            chunk = 0
            bits = 9
            mask = 0x1FF
            end = 255
            continue

        current = code
        match = bytearray()
        if code > end:
            if code != end + 1 or prev > end:
                raise LzwDataError("invalid lzw code")
            match.append(final)
            code = prev

        while code >= 256:
            match.append(suffix[code])
            code = prefix[code]
        match.append(code)
        final = code

        if end < mask:
            end += 1
            prefix[end] = prev
            suffix[end] = final

        prev = current

        match.reverse()
        out += match
        while len(out) >= _OUT_SIZE:
            yield bytes(out[:_OUT_SIZE])
            del out[:_OUT_SIZE]


def unlzwpipe(src: BinaryIO, dst: BinaryIO | None, length: int) -> int:
    """Decompress ``length`` bytes of LZW data from ``src`` into ``dst``.

    The input starts with the two magic bytes. With ``dst`` of ``None`` the
    data is only checksummed. Returns the checksum of the decompressed data.
    """
    data = src.read(length) if length > 0 else b""
    total = 0
    for piece in _decode(data):
        total = cksum_update(piece, total)
        if dst is not None:
            dst.write(piece)
    return total


def decompress(data: bytes) -> bytes:
    """Return the decompressed contents of a complete LZW stream."""
    return b"".join(_decode(bytes(data)))