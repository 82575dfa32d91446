"""Standard CRC-32 checksums, one-shot or accumulated block by block."""

from __future__ import annotations

import os
import zlib

from .binary import to_hex_human_readable


class Crc32:
    """Accumulates a CRC-32 over data fed in pieces."""

    def __init__(self) -> None:
        self._crc = 0

    def update(self, data: bytes) -> Crc32:
        """Feed another block; returns ``self`` so calls can be chained."""
        self._crc = zlib.crc32(bytes(data), self._crc)
        return self

    def value(self) -> int:
        """The checksum of everything fed so far."""
        return self._crc


def crc32(data: bytes) -> int:
    """CRC-32 of ``data``."""
    return zlib.crc32(bytes(data))


def crc32_file(path: str | os.PathLike[str]) -> int:
    """CRC-32 of a file's contents, or 0 when the file cannot be read."""
    try:
        with open(path, "rb") as stream:
            checksum = Crc32()
            for chunk in iter(lambda: stream.read(1 << 16), b""):
                checksum.update(chunk)
            return checksum.value()
    except OSError:
        return 0


def crc32_to_string(value: int) -> str:
    """Upper-case hex of a checksum, most significant byte first."""
    return to_hex_human_readable(value, 4)