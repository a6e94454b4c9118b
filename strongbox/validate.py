from __future__ import annotations

from typing import Any, Union

from .errors import InvalidArgumentError


def ensure(condition: Any, error: Union[str, BaseException], **attrs: Any) -> None:
    """Raise ``error`` unless ``condition`` is truthy.

    A string ``error`` is wrapped in :class:`InvalidArgumentError`. Any
    keyword arguments are attached to the exception as attributes so callers
    can carry extra context (e.g. ``field="key"``) alongside the message.
    """
    if condition:
        return
    if isinstance(error, str):
        error = InvalidArgumentError(error)
    for name, value in attrs.items():
        setattr(error, name, value)
    raise error
