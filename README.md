# xpacklib

Pure-Python building blocks for the xpack archive format and the small
toolkit around it. There are no third-party runtime dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `xpacklib.meta` | The fixed-size little-endian records of an xpack file (`MetaSignature`, `MetaHeader`, `MetaHash`, `MetaBlock`), the constants `SIGNATURE`, `VERSION` and `SIGNATURE_ALIGNED`, the flag enums `HashFlags` and `BlockFlags`, the `Error` codes with the `XpackError` exception, and `aligned_offset` for the 512-byte signature alignment. |
| `xpacklib.binary` | Hex and bit-string rendering (`to_hex`, `to_binary`, and the most-significant-byte-first forms `to_hex_human_readable`, `to_binary_human_readable`) plus byte-order helpers (`is_big_endian`, `reverse_bytes`, `to_net`, `to_host`). |
| `xpacklib.hashing` | String hashes: `bkdr`, `djb`, `ap`, `murmur32`, `murmur64_x86`, `murmur64_x64`, and `hash32_to_string` / `hash64_to_string` for display. |
| `xpacklib.crc32` | Standard CRC-32, one-shot (`crc32`, `crc32_file`) or incremental (`Crc32`), and `crc32_to_string`. |
| `xpacklib.rc4` | The `RC4` stream cipher; encrypting and decrypting are the same call. |
| `xpacklib.zipper` | zlib compression (`compress`, `decompress`, `compressed_max_size`, `CompressLevel`) and zip archive access (`ZipWriter`, `ZipReader`, `ZipMode`). |
| `xpacklib.collection` | `HashMap`, a score-ordered `SortedSet`, and set algebra on sets and on sorted sequences. |

## Examples

### Reading and writing records

Each record class round-trips through its packed byte form:

```python
from xpacklib.meta import MetaBlock, MetaSignature, aligned_offset

block = MetaBlock(offset=0, size=5, next_index=-1, flags=0)
raw = block.pack()
assert len(raw) == MetaBlock.SIZE
assert MetaBlock.unpack(raw) == block

assert MetaSignature.unpack(MetaSignature().pack()) == MetaSignature()
assert aligned_offset(1000) == 1024
```

`aligned_offset(size)` gives the offset at which a package appended after
`size` bytes of existing data must place its signature. Unpacking too few
bytes, or packing a value that does not fit its field, raises `XpackError`
with the code `Error.FORMAT`.

### Hex and byte order

```python
from xpacklib.binary import to_hex, to_hex_human_readable, reverse_bytes

assert to_hex(b"\x01\xab\xcd", 1) == "01 AB CD"
assert to_hex_human_readable(0x12345678, 4) == "12345678"
assert reverse_bytes(0x1234, 2) == 0x3412
```

### Checksums and hashes

```python
from xpacklib.crc32 import Crc32, crc32, crc32_to_string

value = crc32(b"hello")
print(crc32_to_string(value))      # upper-case hex, most significant byte first

running = Crc32()
running.update(b"hel").update(b"lo")
assert running.value() == value
```

`crc32_file(path)` returns 0 when the file cannot be read.

```python
from xpacklib.hashing import murmur32, hash32_to_string

print(hash32_to_string(murmur32(b"name53", 0)))
```

### Encrypting data

```python
from xpacklib.rc4 import RC4

cipher = RC4(b"secret")
sealed = cipher.crypt(b"payload")
assert cipher.crypt(sealed) == b"payload"
```

The keystream starts afresh on every call, so one object can encrypt and
decrypt any number of independent buffers. Keys may be `bytes` or `str`
(encoded as UTF-8) and must be 1 to 256 bytes long; otherwise `ValueError`
is raised. `crypt_file(path)` returns empty bytes when the file cannot be read.

### Compression

`compress(data, level)` deflates a buffer into a zlib stream;
`decompress(data, size)` inflates it again. When `size` is given it is the
largest output allowed, normally the original length stored alongside the
compressed bytes. A stream that is corrupt, truncated or larger than `size`
raises `XpackError` with the code `Error.COMPRESS`.

```python
from xpacklib.zipper import compress, decompress, CompressLevel

packed = compress(b"abc" * 100, CompressLevel.BEST_COMPRESSION)
assert decompress(packed, 300) == b"abc" * 100
```

Zip archives are written with `ZipWriter` (mode `ZipMode.CREATE` empties or
creates the file, `ZipMode.ADD_IN` appends to an existing archive) and read
with `ZipReader`:

```python
from xpacklib.zipper import ZipReader, ZipWriter, ZipMode

with ZipWriter("bundle.zip", ZipMode.CREATE) as archive:
    archive.set_content("docs/readme.txt", b"hello")

with ZipReader("bundle.zip") as archive:
    for name in archive.file_names():
        print(name, archive.uncompressed_size(name))
    print(archive.find("DOCS/README.TXT", ignore_case=True))
    print(archive.read("docs/readme.txt"))
```

Entries cannot be removed from an archive; write a new one holding the rest.

### Collections

```python
from xpacklib.collection import HashMap, SortedSet, sorted_union

free_blocks = SortedSet()
free_blocks.update(7, 128)
free_blocks.update(3, 16)
assert free_blocks.first() == 3     # lowest score first
assert list(free_blocks) == [(3, 16), (7, 128)]

names = HashMap()
assert names.set("a", 1)
assert not names.set("a", 2)        # set never replaces
assert names.update("a", 2) and names.get("a") == 2

assert sorted_union(["a", "c"], ["b", "c"]) == ["a", "b", "c"]
```

## Errors

Record packing and unpacking, and zlib compression and decompression, raise
`xpacklib.meta.XpackError`, which carries one of the `Error` codes in its
`code` attribute. Elsewhere the usual Python exceptions are used:
`ValueError` for bad arguments, `KeyError` for a missing zip entry,
`FileNotFoundError` when appending to a zip archive that does not exist.

## What this package does not do

It provides the pieces an xpack archive is made of, not the archive itself:
there is no class that opens, creates, lists, extracts or modifies whole
xpack package files, and no command-line tool. The record classes only
encode and decode single records; laying them out in a file is left to the
caller.