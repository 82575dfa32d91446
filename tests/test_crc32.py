import zlib

from hypothesis import given
from hypothesis import strategies as st

from xpacklib.crc32 import Crc32, crc32, crc32_file, crc32_to_string


def test_standard_check_value():
    assert crc32(b"123456789") == 0xCBF43926


def test_empty_input_is_zero():
    assert crc32(b"") == 0
    assert Crc32().value() == 0


@given(st.binary(max_size=200))
def test_matches_reference_checksum(data):
    assert crc32(data) == zlib.crc32(data)


@given(st.lists(st.binary(max_size=50), max_size=6))
def test_blockwise_equals_one_shot(blocks):
    checksum = Crc32()
    for block in blocks:
        checksum.update(block)
    assert checksum.value() == crc32(b"".join(blocks))


def test_update_chains():
    assert Crc32().update(b"1234").update(b"56789").value() == crc32(b"123456789")


def test_file_checksum(tmp_path):
    path = tmp_path / "data.bin"
    content = bytes(range(256)) * 1000
    path.write_bytes(content)
    assert crc32_file(path) == crc32(content)


def test_missing_file_gives_zero(tmp_path):
    assert crc32_file(tmp_path / "missing.bin") == 0


def test_to_string_is_big_endian_hex():
    assert crc32_to_string(crc32(b"123456789")) == "CBF43926"
    assert crc32_to_string(0) == "00000000"