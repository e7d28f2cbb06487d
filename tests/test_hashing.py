import pytest

from modrepo.hashing import xxhash64


def test_empty_input():
    assert xxhash64(b"") == 0xEF46DB3751D8E999


def test_single_byte():
    assert xxhash64(b"a") == 0xD24EC4F1A98C6E5B


def test_short_string():
    assert xxhash64("abc") == 0x44BC2CF5AD770999


def test_str_and_bytes_agree():
    assert xxhash64("192.168.0.1") == xxhash64(b"192.168.0.1")


@pytest.mark.parametrize("size", [0, 3, 4, 7, 8, 31, 32, 33, 64, 100])
def test_result_fits_in_64_bits_and_is_stable(size):
    data = bytes(range(size))
    first = xxhash64(data)
    assert 0 <= first < 2**64
    assert xxhash64(data) == first


def test_seed_changes_result():
    assert xxhash64(b"payload", 1) != xxhash64(b"payload", 0)


def test_single_bit_change_in_long_input():
    data = bytearray(b"x" * 80)
    original = xxhash64(bytes(data))
    data[40] ^= 1
    assert xxhash64(bytes(data)) != original