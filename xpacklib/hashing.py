"""Non-cryptographic string hashes: BKDR, DJB, AP and Murmur."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed_bytes(data: bytes) -> list[int]:
    """Byte values as a signed ``char`` would hold them, widened to 32 bits."""
    return [(byte - 256 if byte > 127 else byte) & _MASK32 for byte in bytes(data)]


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def bkdr(data: bytes) -> int:
    """BKDR hash with seed 131."""
    value = 0
    for char in _signed_bytes(data):
        value = (value * 131 + char) & _MASK32
    return value


def djb(data: bytes) -> int:
    """DJB ("times 33") hash starting from 5381."""
    value = 5381
    for char in _signed_bytes(data):
        value = ((value << 5) + value + char) & _MASK32
    return value


def ap(data: bytes) -> int:
    """Arash Partow's AP hash."""
    value = 0xAAAAAAAA
    for index, char in enumerate(_signed_bytes(data)):
        if index & 1 == 0:
            mixed = ((value << 7) & _MASK32) ^ ((char * (value >> 3)) & _MASK32)
        else:
            mixed = ~(((value << 11) + (char ^ (value >> 5))) & _MASK32) & _MASK32
        value ^= mixed
    return value


def murmur32(data: bytes, seed: int = 131) -> int:
    """32-bit MurmurHash3 (x86 variant) of ``data``."""
    data = bytes(data)
    length = len(data)
    c1, c2 = 0xCC9E2D51, 0x1B873593
    value = seed & _MASK32

    body = length - length % 4
    for (block,) in struct.iter_unpack("<I", data[:body]):
        block = (block * c1) & _MASK32
        block = _rotl32(block, 15)
        block = (block * c2) & _MASK32
        value ^= block
        value = (_rotl32(value, 13) * 5 + 0xE6546B64) & _MASK32

    tail = data[body:]
    if tail:
        block = int.from_bytes(tail, "little")
        block = (block * c1) & _MASK32
        block = _rotl32(block, 15)
        block = (block * c2) & _MASK32
        value ^= block

    value ^= length & _MASK32
    value ^= value >> 16
    value = (value * 0x85EBCA6B) & _MASK32
    value ^= value >> 13
    value = (value * 0xC2B2AE35) & _MASK32
    value ^= value >> 16
    return value


def murmur64_x86(data: bytes, seed: int = 131) -> int:
    """64-bit MurmurHash2 built from two 32-bit lanes (MurmurHash64B)."""
    data = bytes(data)
    m = 0x5BD1E995
    r = 24
    length = len(data)
    h1 = (seed ^ length) & _MASK32
    h2 = 0

    def mix(word: int) -> int:
        word = (word * m) & _MASK32
        word ^= word >> r
        return (word * m) & _MASK32

    words = [word for (word,) in struct.iter_unpack("<I", data[: length - length % 4])]
    pairs = length // 8
    for first, second in zip(words[0 : 2 * pairs : 2], words[1 : 2 * pairs : 2]):
        h1 = ((h1 * m) & _MASK32) ^ mix(first)
        h2 = ((h2 * m) & _MASK32) ^ mix(second)
    if len(words) > 2 * pairs:
        h1 = ((h1 * m) & _MASK32) ^ mix(words[-1])

    tail = data[len(words) * 4 :]
    if tail:
        h2 ^= int.from_bytes(tail, "little")
        h2 = (h2 * m) & _MASK32

    h1 ^= h2 >> 18
    h1 = (h1 * m) & _MASK32
    h2 ^= h1 >> 22
    h2 = (h2 * m) & _MASK32
    h1 ^= h2 >> 17
    h1 = (h1 * m) & _MASK32
    h2 ^= h1 >> 19
    h2 = (h2 * m) & _MASK32
    return (h1 << 32) | h2


def murmur64_x64(data: bytes, seed: int = 131) -> int:
    """64-bit MurmurHash2 for 64-bit machines (MurmurHash64A)."""
    data = bytes(data)
    m = 0xC6A4A7935BD1E995
    r = 47
    length = len(data)
    value = (seed & _MASK64) ^ ((length * m) & _MASK64)

    body = length - length % 8
    for (block,) in struct.iter_unpack("<Q", data[:body]):
        block = (block * m) & _MASK64
        block ^= block >> r
        block = (block * m) & _MASK64
        value ^= block
        value = (value * m) & _MASK64

    tail = data[body:]
    if tail:
        value ^= int.from_bytes(tail, "little")
        value = (value * m) & _MASK64

    value ^= value >> r
    value = (value * m) & _MASK64
    value ^= value >> r
    return value


def hash32_to_string(value: int) -> str:
    """Eight upper-case hex digits of a 32-bit hash."""
    return f"{value & _MASK32:08X}"


def hash64_to_string(value: int) -> str:
    """Decimal digits of a 64-bit hash."""
    return str(value & _MASK64)