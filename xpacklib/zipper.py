"""Zlib compression helpers and simple zip archive writing and reading."""

from __future__ import annotations

import enum
import os
import warnings
import zipfile
import zlib

from .meta import Error, XpackError

_SEPARATOR = "/"


class CompressLevel(enum.IntEnum):
    """Zlib compression levels."""

    NO_COMPRESSION = 0
    DEFAULT = -1
    BEST_SPEED = 1
    BEST_COMPRESSION = 9


class ZipMode(enum.IntEnum):
    """How a zip archive is opened for writing."""

    CREATE = 0
    """Create the archive, emptying any existing file."""
    ADD_IN = 2
    """Add to an existing archive; fails when the file does not exist."""


def compressed_max_size(length: int) -> int:
    """Upper bound of the compressed size of ``length`` input bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return length + (length >> 12) + (length >> 14) + (length >> 25) + 13


def compress(data: bytes, level: int = CompressLevel.DEFAULT) -> bytes:
    """Compress ``data`` into a zlib stream."""
    try:
        return zlib.compress(bytes(data), int(level))
    except zlib.error as exc:
        raise XpackError(Error.COMPRESS, str(exc)) from exc


def decompress(data: bytes, size: int | None = None) -> bytes:
    """Decompress a zlib stream.

    ``size`` is the largest output allowed; a stream that expands beyond
    it, or that is truncated or corrupt, raises :class:`XpackError`.
    """
    if size is not None and size < 0:
        raise ValueError("size must not be negative")
    inflater = zlib.decompressobj()
    try:
        if size is None:
            out = inflater.decompress(bytes(data))
        else:
            out = inflater.decompress(bytes(data), size + 1)
    except zlib.error as exc:
        raise XpackError(Error.COMPRESS, str(exc)) from exc
    if size is not None and len(out) > size:
        raise XpackError(Error.COMPRESS, f"output exceeds {size} bytes")
    if not inflater.eof:
        raise XpackError(Error.COMPRESS, "incomplete compressed stream")
    return out


class ZipWriter:
    """Writes entries into a zip archive.

    Entries cannot be removed; to drop one, write a new archive holding
    the rest.
    """

    def __init__(
        self, path: str | os.PathLike[str], mode: ZipMode = ZipMode.ADD_IN
    ) -> None:
        mode = ZipMode(mode)
        if mode is ZipMode.ADD_IN:
            if not os.path.isfile(path):
                raise FileNotFoundError(f"no zip archive at {os.fspath(path)!r}")
            if not zipfile.is_zipfile(path):
                raise zipfile.BadZipFile(f"not a zip archive: {os.fspath(path)!r}")
            self._zip: zipfile.ZipFile | None = zipfile.ZipFile(path, "a")
        else:
            self._zip = zipfile.ZipFile(path, "w")

    def _archive(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise ValueError("zip archive is closed")
        return self._zip

    def set_content(self, filename: str, content: bytes) -> None:
        """Write an entry; a later entry of the same name takes precedence."""
        archive = self._archive()
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            archive.writestr(
                filename, bytes(content), compress_type=zipfile.ZIP_DEFLATED
            )

    def close(self) -> None:
        """Finish the archive; closing twice is harmless."""
        if self._zip is not None:
            archive, self._zip = self._zip, None
            archive.close()

    def __enter__(self) -> ZipWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class ZipReader:
    """Reads entries from a zip archive."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._zip: zipfile.ZipFile | None = zipfile.ZipFile(path, "r")

    def _archive(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise ValueError("zip archive is closed")
        return self._zip

    def close(self) -> None:
        """Release the archive; closing twice is harmless."""
        if self._zip is not None:
            archive, self._zip = self._zip, None
            archive.close()

    def __enter__(self) -> ZipReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def entry_count(self) -> int:
        """Number of entries, files and directories alike."""
        return len(self._archive().infolist())

    def names(self) -> list[str]:
        """Names of all entries, in archive order."""
        return self._archive().namelist()

    def file_names(self) -> list[str]:
        """Names of the file entries."""
        return [name for name in self.names() if not name.endswith(_SEPARATOR)]

    def dir_names(self) -> list[str]:
        """Names of the directory entries (those ending with a separator)."""
        return [name for name in self.names() if name.endswith(_SEPARATOR)]

    def find(self, name: str, ignore_case: bool = False) -> str | None:
        """The first entry named ``name``, or ``None``."""
        if ignore_case:
            wanted = name.lower()
            return next(
                (entry for entry in self.names() if entry.lower() == wanted), None
            )
        return name if name in self.names() else None

    def find_containing(self, fragment: str) -> str | None:
        """The first entry whose name contains ``fragment``, or ``None``."""
        return next((entry for entry in self.names() if fragment in entry), None)

    def is_directory(self, name: str) -> bool:
        """Whether the entry ``name`` is a directory; ``KeyError`` if absent."""
        return self._archive().getinfo(name).filename.endswith(_SEPARATOR)

    def compressed_size(self, name: str) -> int:
        """Stored size of the entry ``name``."""
        return self._archive().getinfo(name).compress_size

    def uncompressed_size(self, name: str) -> int:
        """Original size of the entry ``name``."""
        return self._archive().getinfo(name).file_size

    def read(self, name: str) -> bytes:
        """Uncompressed content of the entry ``name``; ``KeyError`` if absent."""
        return self._archive().read(name)