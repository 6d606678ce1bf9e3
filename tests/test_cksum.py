import pytest

from uninst.cksum import cksum, cksum_update


def test_empty_data_is_zero():
    assert cksum(b"") == 0


def test_single_byte_from_zero():
    assert cksum(b"\x05") == 5


def test_low_bit_rotates_to_top():
    assert cksum(b"\x01\x00") == 0x8000


def test_empty_update_keeps_seed():
    assert cksum_update(b"", 1234) == 1234


@pytest.mark.parametrize(
    "first, second",
    [
        (b"", b"abc"),
        (b"hello ", b"world"),
        (bytes(range(256)), bytes(range(255, -1, -1))),
        (b"\xff" * 1000, b"\x00" * 3),
    ],
)
def test_update_chains(first, second):
    assert cksum_update(second, cksum(first)) == cksum(first + second)


def test_result_fits_sixteen_bits():
    assert 0 <= cksum(b"\xff" * 100000) <= 0xFFFF


def test_accepts_bytearray_and_memoryview():
    data = b"some payload bytes"
    assert cksum(bytearray(data)) == cksum(data)
    assert cksum(memoryview(data)) == cksum(data)


def test_order_matters():
    assert cksum(b"\x01\x02") != cksum(b"\x02\x01")
    assert cksum(b"\x01\x02") == cksum_update(b"\x02", cksum(b"\x01"))