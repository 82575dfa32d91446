import pytest
from hypothesis import given
from hypothesis import strategies as st

from xpacklib.meta import (
    SIGNATURE,
    SIGNATURE_ALIGNED,
    VERSION,
    BlockFlags,
    Error,
    HashFlags,
    MetaBlock,
    MetaHash,
    MetaHeader,
    MetaSignature,
    XpackError,
    aligned_offset,
)

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
i32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
u16 = st.integers(min_value=0, max_value=0xFFFF)
u8 = st.integers(min_value=0, max_value=0xFF)


def test_signature_wire_bytes_spell_magic():
    data = MetaSignature().pack()
    assert data[:8] == b"\x1a^XPACK\x1a"
    assert int.from_bytes(data[8:], "little") == VERSION
    assert len(data) == MetaSignature.SIZE


def test_signature_round_trip():
    sig = MetaSignature.unpack(MetaSignature().pack())
    assert sig.signature == SIGNATURE
    assert sig.version == VERSION


def test_header_size_is_fixed():
    assert len(MetaHeader().pack()) == 48


@given(st.lists(u32, min_size=8, max_size=8), st.binary(min_size=16, max_size=16))
def test_header_round_trip(values, reserved):
    header = MetaHeader(*values, reserved=reserved)
    assert MetaHeader.unpack(header.pack()) == header


def test_header_rejects_bad_reserved():
    with pytest.raises(XpackError) as info:
        MetaHeader(reserved=b"x").pack()
    assert info.value.code is Error.FORMAT


@given(u32, u32, i32, u32, u32, u16, u8, u8, u8)
def test_hash_round_trip(h, crc, bi, size, noff, nsize, refc, salt, flags):
    record = MetaHash(h, crc, bi, size, noff, nsize, refc, salt, flags)
    data = record.pack()
    assert len(data) == MetaHash.SIZE
    assert MetaHash.unpack(data) == record


@given(u32, u32, i32, u8)
def test_block_round_trip(offset, size, nxt, flags):
    block = MetaBlock(offset, size, nxt, flags)
    data = block.pack()
    assert len(data) == MetaBlock.SIZE
    assert MetaBlock.unpack(data) == block


def test_block_defaults_have_no_next():
    assert MetaBlock.unpack(MetaBlock().pack()).next_index == -1


def test_flags_survive_round_trip():
    flags = HashFlags.CONFLICT | HashFlags.COMPRESSED
    restored = MetaHash.unpack(MetaHash(flags=flags).pack())
    assert HashFlags(restored.flags) == flags
    block = MetaBlock.unpack(MetaBlock(flags=BlockFlags.NOT_START).pack())
    assert BlockFlags(block.flags) is BlockFlags.NOT_START


@pytest.mark.parametrize("cls", [MetaSignature, MetaHeader, MetaHash, MetaBlock])
def test_unpack_short_data_is_format_error(cls):
    with pytest.raises(XpackError) as info:
        cls.unpack(b"\x00" * (cls.SIZE - 1))
    assert info.value.code is Error.FORMAT


def test_pack_out_of_range_is_format_error():
    with pytest.raises(XpackError) as info:
        MetaBlock(offset=-1).pack()
    assert info.value.code is Error.FORMAT


def test_error_carries_code_and_message():
    err = XpackError(Error.CRC, "bad entry")
    assert err.code is Error.CRC
    assert err.message == "bad entry"
    assert "bad entry" in str(err)


def test_aligned_offset_values():
    assert aligned_offset(0) == 0
    assert aligned_offset(1) == SIGNATURE_ALIGNED
    assert aligned_offset(SIGNATURE_ALIGNED) == SIGNATURE_ALIGNED
    assert aligned_offset(1000) == 1024


@given(st.integers(min_value=0, max_value=10**9))
def test_aligned_offset_invariant(size):
    off = aligned_offset(size)
    assert off % SIGNATURE_ALIGNED == 0
    assert size <= off < size + SIGNATURE_ALIGNED


def test_aligned_offset_rejects_negative():
    with pytest.raises(ValueError):
        aligned_offset(-1)