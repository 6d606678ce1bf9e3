"""Reading stored (uncompressed) file data out of an image file."""

from __future__ import annotations

from typing import BinaryIO

from .cksum import cksum_update

__all__ = ["ImageReadError", "seek_past_name", "copypipe"]

BUFSIZ = 8192


class ImageReadError(OSError):
    """The image file ended early or held an unreadable record."""


def _read_exact(src: BinaryIO, count: int, what: str) -> bytes:
    data = src.read(count)
    if len(data) != count:
        raise ImageReadError(f"couldn't read {what} from image")
    return data


def seek_past_name(src: BinaryIO) -> bytes:
    """Skip the length-prefixed install path that precedes file data.

    The record is a big-endian 16-bit length followed by that many bytes of
    path, without a terminator. The skipped path is returned; afterwards
    ``src`` is positioned at the start of the file data.
    """
    length = int.from_bytes(_read_exact(src, 2, "name length"), "big")
    if length > BUFSIZ:
        raise ImageReadError(f"name length {length} in image is too long")
    return _read_exact(src, length, "name")


def copypipe(src: BinaryIO, dst: BinaryIO | None, length: int) -> int:
    """Copy ``length`` bytes from ``src`` to ``dst`` and return their checksum.

    With ``dst`` of ``None`` the data is only checksummed.
    """
    total = 0
    remaining = length
    while remaining > 0:
        block = src.read(min(remaining, BUFSIZ))
        if not block:
            raise ImageReadError("couldn't read from image: unexpected end of data")
        total = cksum_update(block, total)
        if dst is not None:
            dst.write(block)
        remaining -= len(block)
    return total