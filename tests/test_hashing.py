import pytest
from hypothesis import given
from hypothesis import strategies as st

from xpacklib.hashing import (
    ap,
    bkdr,
    djb,
    hash32_to_string,
    hash64_to_string,
    murmur32,
    murmur64_x64,
    murmur64_x86,
)


def test_empty_input_yields_start_values():
    assert bkdr(b"") == 0
    assert djb(b"") == 5381
    assert ap(b"") == 0xAAAAAAAA


def test_bkdr_single_ascii_byte_is_its_code():
    assert bkdr(b"a") == ord("a")


def test_bkdr_treats_high_bytes_as_signed():
    assert bkdr(b"\xff") == 0xFFFFFFFF


@pytest.mark.parametrize(
    "name, seed, bucket",
    [
        ("name53", 0, 10),
        ("name70", 0, 10),
        ("name87", 0, 10),
        ("name34", 0, 9),
        ("name69", 0, 9),
        ("name99", 0, 7),
        ("name34", 1, 7),
    ],
)
def test_murmur32_buckets_used_for_conflicts(name, seed, bucket):
    assert murmur32(name.encode(), seed) % 20 == bucket


def test_murmur_empty_zero_seed_is_zero():
    assert murmur32(b"", 0) == 0
    assert murmur64_x86(b"", 0) == 0
    assert murmur64_x64(b"", 0) == 0


@given(st.binary(max_size=40), st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_hashes_fit_their_width(data, seed):
    assert 0 <= bkdr(data) < 2**32
    assert 0 <= djb(data) < 2**32
    assert 0 <= ap(data) < 2**32
    assert 0 <= murmur32(data, seed) < 2**32
    assert 0 <= murmur64_x86(data, seed) < 2**64
    assert 0 <= murmur64_x64(data, seed) < 2**64


@given(st.binary(max_size=40))
def test_hashes_are_deterministic(data):
    assert murmur32(data) == murmur32(bytes(data))
    assert murmur64_x86(data) == murmur64_x86(bytearray(data))
    assert murmur64_x64(data) == murmur64_x64(bytearray(data))


@pytest.mark.parametrize("length", range(0, 18))
def test_murmur_seed_changes_result(length):
    data = bytes(range(length))
    assert murmur32(data, 1) != murmur32(data, 2)
    assert murmur64_x64(data, 1) != murmur64_x64(data, 2)
    assert murmur64_x86(data, 1) != murmur64_x86(data, 2)


def test_murmur_default_seed_matches_explicit():
    assert murmur32(b"hello") == murmur32(b"hello", 131)
    assert murmur64_x86(b"hello") == murmur64_x86(b"hello", 131)
    assert murmur64_x64(b"hello") == murmur64_x64(b"hello", 131)


def test_hash32_to_string_pads_to_eight_digits():
    assert hash32_to_string(255) == "000000FF"
    assert len(hash32_to_string(murmur32(b"x"))) == 8


def test_hash64_to_string_is_decimal():
    assert hash64_to_string(12345) == "12345"
    value = murmur64_x64(b"entry")
    assert int(hash64_to_string(value)) == value