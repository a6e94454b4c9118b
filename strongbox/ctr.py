from __future__ import annotations

"""AES-256-CTR stream cipher backed by PyCryptodomex.

The whole 16-byte IV is used as the initial big-endian counter block (no
separate nonce prefix), which is how OpenSSL's ``aes-256-ctr`` behaves. In CTR
mode encryption and decryption are the same keystream XOR, so a single
``ctr_apply`` covers both directions.
"""

from Cryptodome.Cipher import AES
from Cryptodome.Random import get_random_bytes

from .constants import IV_SIZE, KEY_SIZE


def random_iv() -> bytes:
    """Return a fresh 16-byte IV from the OS CSPRNG."""
    return get_random_bytes(IV_SIZE)


def ctr_apply(key: bytes, iv: bytes, data: bytes) -> bytes:
    if len(key) != KEY_SIZE:
        raise ValueError("Key must be 32 bytes for AES-256-CTR")
    if len(iv) != IV_SIZE:
        raise ValueError("IV must be 16 bytes for AES-256-CTR")
    cipher = AES.new(key, AES.MODE_CTR, nonce=b"", initial_value=iv)
    return cipher.encrypt(data)


__all__ = [
    "random_iv",
    "ctr_apply",
]
