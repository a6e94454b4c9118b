from __future__ import annotations

"""Optional value transforms applied around the cipher.

A transform lets callers seal values that are not already ``str``/``bytes``.
On encode it runs before validation and must return non-empty text or bytes;
on decode it runs on the recovered plaintext. Whatever a transform raises is
passed through to the caller untouched.
"""

import json
from typing import Any, Callable, Optional

from .validate import ensure


Transform = Callable[[Any], Any]


def check_transform(transform: Optional[Transform]) -> None:
    ensure(transform is None or callable(transform), "Expected transform to be a function", field="transform")


def apply_transform(transform: Optional[Transform], value: Any) -> Any:
    if transform is None:
        return value
    return transform(value)


def json_dumps(value: Any) -> str:
    """Compact JSON serializer for use as an encode transform."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def json_loads(text: Any) -> Any:
    """JSON parser for use as a decode transform (accepts str or bytes)."""
    return json.loads(text)


__all__ = [
    "Transform",
    "check_transform",
    "apply_transform",
    "json_dumps",
    "json_loads",
]
