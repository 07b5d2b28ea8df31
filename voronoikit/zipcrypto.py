"""Traditional PKWARE (ZipCrypto) stream encryption."""

from __future__ import annotations

import os
from typing import Optional, Union

_MASK32 = 0xFFFFFFFF
RAND_HEAD_LEN = 12


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ 0xEDB88320 if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


_CRC_TABLE = _make_crc_table()


def _crc32(crc: int, byte: int) -> int:
    return _CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class ZipCrypto:
    """Keyed cipher state for traditional ZIP encryption."""

    def __init__(self, password: Union[str, bytes]) -> None:
        self._keys = [305419896, 591751049, 878082192]
        for byte in _as_bytes(password):
            self.update_keys(byte)

    @property
    def keys(self) -> tuple[int, int, int]:
        """The three 32-bit key registers."""
        return tuple(self._keys)

    def decrypt_byte(self) -> int:
        """Next byte of the key stream; does not advance the state."""
        temp = (self._keys[2] & 0xFFFF) | 2
        return ((temp * (temp ^ 1)) >> 8) & 0xFF

    def update_keys(self, c: int) -> int:
        """Advance the keys with one byte of plain text and return it."""
        keys = self._keys
        keys[0] = _crc32(keys[0], c)
        keys[1] = ((keys[1] + (keys[0] & 0xFF)) * 134775813 + 1) & _MASK32
        keys[2] = _crc32(keys[2], keys[1] >> 24)
        return c

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt ``data``, advancing the state."""
        out = bytearray()
        for c in data:
            t = self.decrypt_byte()
            self.update_keys(c)
            out.append(t ^ c)
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ``data``, advancing the state."""
        out = bytearray()
        for c in data:
            plain = c ^ self.decrypt_byte()
            self.update_keys(plain)
            out.append(plain)
        return bytes(out)


def crypt_header(
    password: Union[str, bytes],
    crc_for_crypting: int,
    random_bytes: Optional[bytes] = None,
) -> tuple[bytes, ZipCrypto]:
    """Build the 12-byte encryption header for an entry.

    Returns the header and the cipher state ready to encrypt the entry data.
    ``random_bytes`` supplies the ten seed bytes; fresh ones are drawn if omitted.
    """
    if random_bytes is None:
        random_bytes = os.urandom(RAND_HEAD_LEN - 2)
    if len(random_bytes) != RAND_HEAD_LEN - 2:
        raise ValueError(f"random_bytes must be {RAND_HEAD_LEN - 2} bytes long")
    header = ZipCrypto(password).encrypt(random_bytes)
    cipher = ZipCrypto(password)
    check = bytes(
        [(crc_for_crypting >> 16) & 0xFF, (crc_for_crypting >> 24) & 0xFF]
    )
    return cipher.encrypt(header + check), cipher