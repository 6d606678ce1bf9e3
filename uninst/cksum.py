"""The 16-bit rotating checksum used by 'inst' idb files."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["cksum_update", "cksum"]


def cksum_update(data: Iterable[int], seed: int = 0) -> int:
    """Continue a checksum from ``seed`` over the bytes in ``data``."""
    total = seed & 0xFFFF
    for byte in data:
        total = ((total >> 1) | ((total & 1) << 15)) + byte
        total &= 0xFFFF
    return total


def cksum(data: Iterable[int]) -> int:
    """Return the checksum of ``data`` starting from zero."""
    return cksum_update(data, 0)