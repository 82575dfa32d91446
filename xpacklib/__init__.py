"""Building blocks for the xpack archive format: records, hashes, CRC-32,
RC4, zlib/zip helpers and small collections."""

__version__ = "0.9.0"

__all__ = ["binary", "collection", "crc32", "hashing", "meta", "rc4", "zipper"]