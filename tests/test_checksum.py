import zlib

import pytest

from nippon.checksum import crc32


def test_standard_check_value():
    assert crc32(b"123456789") == 0xCBF43926


def test_empty_input_is_zero():
    assert crc32(b"") == 0
    assert crc32("") == 0


def test_matches_zlib_for_large_input():
    data = bytes(range(256)) * 100
    assert crc32(data) == zlib.crc32(data)


@pytest.mark.parametrize("chunk_size", [1, 3, 7, 64, 4096, 1 << 20])
def test_result_does_not_depend_on_chunk_size(chunk_size):
    data = bytes(i * 7 % 251 for i in range(10000))
    assert crc32(data, chunk_size) == crc32(data)


def test_str_is_hashed_as_utf8():
    assert crc32("data_pc/file.dat") == crc32(b"data_pc/file.dat")


def test_bytearray_input():
    assert crc32(bytearray(b"123456789")) == crc32(b"123456789")


def test_result_is_unsigned_32_bit():
    value = crc32(b"\xff" * 1000)
    assert 0 <= value <= 0xFFFFFFFF


def test_detects_single_bit_change():
    assert crc32(b"abcdef") != crc32(b"abcdeg")


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_non_positive_chunk_size_is_rejected(chunk_size):
    with pytest.raises(ValueError):
        crc32(b"abc", chunk_size)