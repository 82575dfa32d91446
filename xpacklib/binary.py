"""Hex and binary rendering of bytes, and byte-order conversion."""

from __future__ import annotations

import sys


def _spaced(chunks: list[str], byteblank: int) -> str:
    if byteblank <= 0:
        return "".join(chunks)
    groups = (
        "".join(chunks[start : start + byteblank])
        for start in range(0, len(chunks), byteblank)
    )
    return " ".join(groups)


def to_hex(data: bytes, byteblank: int = 0) -> str:
    """Upper-case hex of ``data``, a space after every ``byteblank`` bytes."""
    return _spaced([f"{byte:02X}" for byte in bytes(data)], byteblank)


def to_binary(data: bytes, byteblank: int = 0) -> str:
    """Bits of ``data``, most significant first, spaced like :func:`to_hex`."""
    return _spaced([f"{byte:08b}" for byte in bytes(data)], byteblank)


def _unsigned(value: int, width: int) -> int:
    if width <= 0:
        raise ValueError("width must be a positive number of bytes")
    bits = 8 * width
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in {width} bytes")
    return value & ((1 << bits) - 1)


def to_hex_human_readable(value: int, width: int = 4, byteblank: int = 0) -> str:
    """Hex of an integer of ``width`` bytes, most significant byte first."""
    return to_hex(_unsigned(value, width).to_bytes(width, "big"), byteblank)


def to_binary_human_readable(value: int, width: int = 4, byteblank: int = 0) -> str:
    """Bits of an integer of ``width`` bytes, most significant bit first."""
    return to_binary(_unsigned(value, width).to_bytes(width, "big"), byteblank)


def is_big_endian() -> bool:
    """Whether this machine stores integers most significant byte first."""
    return sys.byteorder == "big"


def reverse_bytes(value: int, width: int) -> int:
    """Swap the byte order of an integer of ``width`` bytes."""
    raw = _unsigned(value, width).to_bytes(width, "little")
    return int.from_bytes(raw, "big")


def to_net(value: int, width: int) -> int:
    """Convert a host-order integer of ``width`` bytes to network order."""
    if is_big_endian():
        return _unsigned(value, width)
    return reverse_bytes(value, width)


def to_host(value: int, width: int) -> int:
    """Convert a network-order integer of ``width`` bytes to host order."""
    return to_net(value, width)