import io

import pytest

from uninst.cksum import cksum
from uninst.copypipe import ImageReadError, copypipe, seek_past_name


def test_seek_past_name_returns_path_and_positions_stream():
    src = io.BytesIO(b"\x00\x07usr/bin" + b"DATA")
    assert seek_past_name(src) == b"usr/bin"
    assert src.read() == b"DATA"


def test_seek_past_empty_name():
    src = io.BytesIO(b"\x00\x00rest")
    assert seek_past_name(src) == b""
    assert src.tell() == 2


def test_seek_past_name_missing_length():
    with pytest.raises(ImageReadError):
        seek_past_name(io.BytesIO(b"\x00"))


def test_seek_past_name_truncated_name():
    with pytest.raises(ImageReadError):
        seek_past_name(io.BytesIO(b"\x00\x05ab"))


def test_seek_past_name_rejects_oversized_length():
    with pytest.raises(ImageReadError):
        seek_past_name(io.BytesIO(b"\xff\xff" + b"x" * 70000))


def test_copypipe_copies_and_checksums():
    payload = bytes(range(256)) * 3
    src = io.BytesIO(payload + b"trailing")
    dst = io.BytesIO()
    assert copypipe(src, dst, len(payload)) == cksum(payload)
    assert dst.getvalue() == payload
    assert src.tell() == len(payload)


def test_copypipe_without_output_only_checksums():
    payload = b"checksum me please"
    src = io.BytesIO(payload)
    assert copypipe(src, None, len(payload)) == cksum(payload)


def test_copypipe_larger_than_one_block():
    payload = bytes(i % 251 for i in range(50000))
    dst = io.BytesIO()
    assert copypipe(io.BytesIO(payload), dst, len(payload)) == cksum(payload)
    assert dst.getvalue() == payload


def test_copypipe_zero_length():
    dst = io.BytesIO()
    assert copypipe(io.BytesIO(b"abc"), dst, 0) == 0
    assert dst.getvalue() == b""


def test_copypipe_short_input_raises():
    with pytest.raises(ImageReadError):
        copypipe(io.BytesIO(b"abc"), io.BytesIO(), 10)


def test_copypipe_after_name():
    payload = b"file contents"
    src = io.BytesIO(b"\x00\x03a/b" + payload)
    seek_past_name(src)
    dst = io.BytesIO()
    copypipe(src, dst, len(payload))
    assert dst.getvalue() == payload