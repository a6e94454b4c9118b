"""
Strongbox — passphrase encryption for small opaque values.

Features:

- ``encode``/``decode`` seal a ``str`` or ``bytes`` value under a passphrase
  with AES-256-CTR and a fresh random 16-byte IV per call.
- Frames are ``IV || ciphertext``: lowercase hex for text plaintexts, raw bytes
  for binary plaintexts. Decoding mirrors whichever form it is given.
- Optional transforms (e.g. ``json_dumps``/``json_loads``) let structured values
  round-trip through the codec.
- A ``strongbox`` command line tool for encrypting, decrypting and hashing.

The key is a single SHA-256 of the passphrase and frames carry no MAC, so the
codec provides confidentiality only: tampering and wrong keys are not detected.
"""

__version__ = "0.1"

from .codec import Frame, aes_decrypt, aes_encrypt, decode, encode
from .errors import InvalidArgumentError, InvalidInputError, StrongboxError
from .keys import derive_key
from .payload import Payload, PayloadKind
from .transform import json_dumps, json_loads
from .validate import ensure

__all__ = [
    "encode",
    "decode",
    "aes_encrypt",
    "aes_decrypt",
    "derive_key",
    "ensure",
    "json_dumps",
    "json_loads",
    "Frame",
    "Payload",
    "PayloadKind",
    "StrongboxError",
    "InvalidArgumentError",
    "InvalidInputError",
]
