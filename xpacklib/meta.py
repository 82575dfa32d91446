"""On-disk records and constants of the xpack archive format."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import ClassVar

SIGNATURE = 0x1A4B434150585E1A
"""The ``'\\x1A^XPACK\\x1A'`` magic stored at the start of an archive."""

VERSION = 0x0009
"""Format version written by this package."""

SIGNATURE_ALIGNED = 0x200
"""The signature has to start at an offset aligned to this many bytes."""


class Error(enum.IntEnum):
    """Error codes reported by archive operations."""

    NO_ERR = 0
    IO = -1
    MEMORY = -2
    FORMAT = -3
    VERSION = -4
    CRC = -5
    ALREADY_EXISTS = -11
    NOT_EXISTS = -12
    COMPRESS = -13
    UNKNOWN = -99


class HashFlags(enum.IntFlag):
    """Flags of a hash record."""

    UNUSED = 1 << 0
    CONFLICT = 1 << 1
    CRYPTO_RC4 = 1 << 2
    COMPRESSED = 1 << 3


class BlockFlags(enum.IntFlag):
    """Flags of a block record."""

    UNUSED_CONTENT = 1 << 0
    UNUSED_BLOCK = 1 << 1
    NOT_START = 1 << 2


class XpackError(Exception):
    """An archive operation failed; ``code`` tells how."""

    def __init__(self, code: Error, message: str = "") -> None:
        self.code = Error(code)
        self.message = message
        text = f"{self.code.name.lower()} error ({int(self.code)})"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


def aligned_offset(size: int) -> int:
    """Return the first offset at or after ``size`` aligned for a signature."""
    if size < 0:
        raise ValueError("size must not be negative")
    return -(-size // SIGNATURE_ALIGNED) * SIGNATURE_ALIGNED


def _pack(layout: struct.Struct, name: str, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise XpackError(Error.FORMAT, f"cannot encode {name}: {exc}") from exc


def _unpack(layout: struct.Struct, name: str, data: bytes) -> tuple:
    if len(data) < layout.size:
        raise XpackError(
            Error.FORMAT,
            f"{name} needs {layout.size} bytes, got {len(data)}",
        )
    return layout.unpack_from(data)


@dataclass
class MetaSignature:
    """The signature section: magic number and format version."""

    signature: int = SIGNATURE
    version: int = VERSION

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<QH")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        return _pack(self._STRUCT, "signature", self.signature, self.version)

    @classmethod
    def unpack(cls, data: bytes) -> MetaSignature:
        return cls(*_unpack(cls._STRUCT, "signature", data))


@dataclass
class MetaHeader:
    """The header section: sizes and offsets of the other sections."""

    archive_size: int = 0
    content_offset: int = 0
    content_size: int = 0
    block_offset: int = 0
    block_count: int = 0
    hash_offset: int = 0
    hash_count: int = 0
    name_size: int = 0
    reserved: bytes = field(default=bytes(16))

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<8I16s")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        if len(self.reserved) != 16:
            raise XpackError(Error.FORMAT, "reserved field must be 16 bytes")
        return _pack(
            self._STRUCT,
            "header",
            self.archive_size,
            self.content_offset,
            self.content_size,
            self.block_offset,
            self.block_count,
            self.hash_offset,
            self.hash_count,
            self.name_size,
            bytes(self.reserved),
        )

    @classmethod
    def unpack(cls, data: bytes) -> MetaHeader:
        return cls(*_unpack(cls._STRUCT, "header", data))


@dataclass
class MetaHash:
    """One hash-table record describing an entry or a conflict link."""

    hash: int = 0
    crc: int = 0
    block_index: int = -1
    unpacked_size: int = 0
    name_offset: int = 0
    name_size: int = 0
    conflict_refc: int = 0
    salt: int = 0
    flags: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIiIIHBBB")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        return _pack(
            self._STRUCT,
            "hash",
            self.hash,
            self.crc,
            self.block_index,
            self.unpacked_size,
            self.name_offset,
            self.name_size,
            self.conflict_refc,
            self.salt,
            int(self.flags),
        )

    @classmethod
    def unpack(cls, data: bytes) -> MetaHash:
        return cls(*_unpack(cls._STRUCT, "hash", data))


@dataclass
class MetaBlock:
    """One block-table record: a slice of the content section."""

    offset: int = 0
    size: int = 0
    next_index: int = -1
    flags: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIiB")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        return _pack(
            self._STRUCT,
            "block",
            self.offset,
            self.size,
            self.next_index,
            int(self.flags),
        )

    @classmethod
    def unpack(cls, data: bytes) -> MetaBlock:
        return cls(*_unpack(cls._STRUCT, "block", data))