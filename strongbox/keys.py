from __future__ import annotations

"""Passphrase to cipher key derivation.

The key is a single unsalted SHA-256 pass over the UTF-8 bytes of the
passphrase. This is weaker than a salted, iterated KDF (Argon2id, scrypt,
PBKDF2) but it is what existing frames were produced with, so it must not be
swapped for a stronger function without versioning the frame format.
"""

from .hashutil import sha256_digest, utf8_bytes
from .validate import ensure


def derive_key(passphrase: str) -> bytes:
    """Return the 32-byte AES-256 key for ``passphrase``.

    Deterministic: the same passphrase always yields the same key. Only the
    type is checked; empty passphrases are accepted.
    """
    ensure(isinstance(passphrase, str), "Expected key to be a string", field="key")
    return sha256_digest(utf8_bytes(passphrase))
