"""RC4 stream cipher; encryption and decryption are the same operation."""

from __future__ import annotations

import os


class RC4:
    """RC4 with a stored key; every call starts a fresh keystream."""

    def __init__(self, key: bytes | str | None = None) -> None:
        self._key = b""
        if key is not None:
            self.set_secret_key(key)

    def set_secret_key(self, key: bytes | str) -> RC4:
        """Store a copy of ``key``; returns ``self`` for chaining."""
        if isinstance(key, str):
            key = key.encode("utf-8")
        key = bytes(key)
        if not key:
            raise ValueError("RC4 key must not be empty")
        if len(key) > 256:
            raise ValueError("RC4 key must be at most 256 bytes")
        self._key = key
        return self

    def _keystream_state(self) -> list[int]:
        if not self._key:
            raise ValueError("no RC4 key has been set")
        key = self._key
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]
        return state

    def crypt(self, data: bytes) -> bytes:
        """Encrypt or decrypt ``data``; the result has the same length."""
        state = self._keystream_state()
        out = bytearray(bytes(data))
        i = j = 0
        for position, byte in enumerate(out):
            i = (i + 1) & 0xFF
            j = (j + state[i]) & 0xFF
            state[i], state[j] = state[j], state[i]
            out[position] = byte ^ state[(state[i] + state[j]) & 0xFF]
        return bytes(out)

    def crypt_file(self, path: str | os.PathLike[str]) -> bytes:
        """Crypt a file's contents; empty bytes when the file cannot be read."""
        try:
            with open(path, "rb") as stream:
                content = stream.read()
        except OSError:
            return b""
        return self.crypt(content)