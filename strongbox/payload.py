from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .constants import HEX_DIGITS, TEXT_ENCODING
from .errors import InvalidArgumentError
from .hashutil import utf8_bytes
from .validate import ensure


Plaintext = Union[str, bytes]
Blob = Union[str, bytes]

_BINARY_TYPES = (bytes, bytearray, memoryview)


class PayloadKind(enum.Enum):
    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True)
class Payload:
    """Raw bytes tagged with the representation the caller used.

    The kind is chosen by the caller's input type and mirrored on output:
    text plaintexts seal to hex text, binary plaintexts seal to raw bytes,
    and decoding returns the same kind the blob was handed in as.
    """

    kind: PayloadKind
    data: bytes

    @classmethod
    def from_plaintext(cls, value: object) -> "Payload":
        if isinstance(value, str):
            ensure(value, "Expected input to be a non-empty string")
            return cls(PayloadKind.TEXT, utf8_bytes(value))
        if isinstance(value, _BINARY_TYPES):
            data = bytes(value)
            ensure(data, "Expected input to be a non-empty buffer")
            return cls(PayloadKind.BINARY, data)
        raise InvalidArgumentError("Expected input to be a string/bytes")

    @classmethod
    def from_blob(cls, blob: object) -> "Payload":
        if isinstance(blob, str):
            ensure(blob, "Expected input to be a non-empty string")
            ensure(
                len(blob) % 2 == 0 and all(ch in HEX_DIGITS for ch in blob),
                "Expected input to be a hex string",
            )
            return cls(PayloadKind.TEXT, bytes.fromhex(blob))
        if isinstance(blob, _BINARY_TYPES):
            data = bytes(blob)
            ensure(data, "Expected input to be a non-empty buffer")
            return cls(PayloadKind.BINARY, data)
        raise InvalidArgumentError("Expected input to be a string/bytes")

    def as_plaintext(self) -> Plaintext:
        if self.kind is PayloadKind.TEXT:
            # Wrong keys produce arbitrary bytes; never fail on them.
            return self.data.decode(TEXT_ENCODING, errors="replace")
        return self.data

    def as_blob(self) -> Blob:
        if self.kind is PayloadKind.TEXT:
            return self.data.hex()
        return self.data
