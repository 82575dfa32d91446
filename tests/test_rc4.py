import pytest
from hypothesis import given
from hypothesis import strategies as st

from xpacklib.rc4 import RC4


@given(st.binary(max_size=300))
def test_crypt_is_its_own_inverse(data):
    cipher = RC4(b"secret")
    encrypted = cipher.crypt(data)
    assert len(encrypted) == len(data)
    assert cipher.crypt(encrypted) == data


def test_each_call_restarts_keystream():
    cipher = RC4("secret")
    data = b"hello world"
    cipher.crypt(b"an earlier message that advances nothing")
    encrypted = cipher.crypt(data)
    assert cipher.crypt(encrypted) == data


@pytest.mark.parametrize(
    "key_bytes, plaintext, expected_hex",
    [
        (b"Key", b"Plaintext", "BBF316E8D940AF0AD3"),
        (b"Wiki", b"pedia", "1021BF0420"),
    ],
)
def test_known_vectors(key_bytes, plaintext, expected_hex):
    assert RC4(key_bytes).crypt(plaintext) == bytes.fromhex(expected_hex)


def test_different_keys_give_different_output():
    data = b"some content to protect"
    assert RC4(b"secret").crypt(data) != RC4(b"password").crypt(data)


def test_str_and_bytes_keys_agree():
    assert RC4("secret").crypt(b"abc") == RC4(b"secret").crypt(b"abc")


def test_set_secret_key_chains_and_replaces():
    cipher = RC4(b"password")
    assert cipher.set_secret_key(b"secret") is cipher
    assert cipher.crypt(b"data") == RC4(b"secret").crypt(b"data")


def test_key_is_copied():
    key = bytearray(b"secret")
    cipher = RC4(key)
    key[0] = ord("X")
    assert cipher.crypt(b"data") == RC4(b"secret").crypt(b"data")


def test_missing_key_raises():
    with pytest.raises(ValueError):
        RC4().crypt(b"data")


def test_empty_key_raises():
    with pytest.raises(ValueError):
        RC4(b"")


def test_crypt_empty_data():
    assert RC4(b"secret").crypt(b"") == b""


def test_crypt_file(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"file content")
    cipher = RC4(b"secret")
    assert cipher.crypt_file(path) == cipher.crypt(b"file content")


def test_crypt_missing_file_gives_empty(tmp_path):
    assert RC4(b"secret").crypt_file(tmp_path / "missing.txt") == b""