from __future__ import annotations

import hashlib
from typing import Callable, Dict, Union

from .constants import TEXT_ENCODING


def utf8_bytes(text: str) -> bytes:
    """UTF-8 encode ``text``, turning lone surrogates into U+FFFD.

    Surrogate pairs left split in the string are joined first, which is how
    WHATWG UTF-8 encoders treat ill-formed UTF-16 text.
    """
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError:
        repaired = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return repaired.encode(TEXT_ENCODING)


def _as_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, str):
        return utf8_bytes(data)
    return bytes(data)


def sha256_digest(data: bytes) -> bytes:
    # 32-byte raw digest; the key derivation depends on this exact output.
    return hashlib.sha256(data).digest()


def md5_hex(data: Union[str, bytes]) -> str:
    return hashlib.md5(_as_bytes(data)).hexdigest()


def sha1_hex(data: Union[str, bytes]) -> str:
    return hashlib.sha1(_as_bytes(data)).hexdigest()


def sha256_hex(data: Union[str, bytes]) -> str:
    return hashlib.sha256(_as_bytes(data)).hexdigest()


HEX_DIGESTS: Dict[str, Callable[[Union[str, bytes]], str]] = {
    "md5": md5_hex,
    "sha1": sha1_hex,
    "sha256": sha256_hex,
}
