from __future__ import annotations

"""Passphrase encryption of opaque text/binary payloads.

Frame layout::

    IV (16 bytes) || AES-256-CTR ciphertext (len(plaintext) bytes)

Text plaintexts are encrypted from their UTF-8 bytes and the frame is
returned as lowercase hex; binary plaintexts return the raw frame. The frame
does not record which of the two was used, so callers must decode with the
same representation they received.

There is no authentication tag. Decoding with the wrong passphrase, or a
tampered frame, silently yields garbage of the right length instead of an
error. Adding a MAC would break compatibility with existing frames.
"""

from dataclasses import dataclass
from typing import Any, Optional, overload

from .constants import IV_SIZE, MIN_FRAME_SIZE
from .ctr import ctr_apply, random_iv
from .keys import derive_key
from .payload import Payload
from .transform import Transform, apply_transform, check_transform
from .validate import ensure


@dataclass(frozen=True)
class Frame:
    iv: bytes
    ciphertext: bytes

    def pack(self) -> bytes:
        return self.iv + self.ciphertext

    @classmethod
    def unpack(cls, data: bytes) -> "Frame":
        ensure(
            len(data) >= MIN_FRAME_SIZE,
            f"Provided input must be at least {MIN_FRAME_SIZE} bytes to decrypt to a non-empty value",
        )
        return cls(iv=data[:IV_SIZE], ciphertext=data[IV_SIZE:])


def _check_key(key: Any) -> None:
    ensure(isinstance(key, str), "Expected key to be a string", field="key")


@overload
def encode(key: str, value: str) -> str: ...
@overload
def encode(key: str, value: bytes) -> bytes: ...
@overload
def encode(key: str, value: Any, transform: Transform) -> Any: ...


def encode(key: str, value: Any, transform: Optional[Transform] = None) -> Any:
    """Encrypt ``value`` under ``key`` and return the sealed frame.

    Args:
        key: Passphrase; hashed with SHA-256 into the AES-256 key.
        value: Non-empty ``str`` or bytes-like, or anything ``transform``
            turns into one.
        transform: Optional callable applied to ``value`` first.

    Returns:
        Hex ``str`` for text plaintexts, ``bytes`` for binary ones.

    Raises:
        InvalidArgumentError: key, transform or plaintext is malformed.
    """
    _check_key(key)
    check_transform(transform)
    plain = Payload.from_plaintext(apply_transform(transform, value))

    iv = random_iv()
    frame = Frame(iv=iv, ciphertext=ctr_apply(derive_key(key), iv, plain.data))
    return Payload(plain.kind, frame.pack()).as_blob()


@overload
def decode(key: str, blob: str) -> str: ...
@overload
def decode(key: str, blob: bytes) -> bytes: ...
@overload
def decode(key: str, blob: Any, transform: Transform) -> Any: ...


def decode(key: str, blob: Any, transform: Optional[Transform] = None) -> Any:
    """Decrypt a frame produced by :func:`encode`.

    A hex ``str`` blob decodes to ``str``; a bytes-like blob decodes to
    ``bytes``. ``transform``, when given, is applied to that result.

    Raises:
        InvalidArgumentError: key or transform is malformed, or the blob is
            empty, not hex (for text), or shorter than 17 bytes.
    """
    _check_key(key)
    check_transform(transform)
    sealed = Payload.from_blob(blob)
    frame = Frame.unpack(sealed.data)

    data = ctr_apply(derive_key(key), frame.iv, frame.ciphertext)
    return apply_transform(transform, Payload(sealed.kind, data).as_plaintext())


aes_encrypt = encode
aes_decrypt = decode
