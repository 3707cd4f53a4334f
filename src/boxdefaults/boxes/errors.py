"""Errors raised while loading box defaults."""

from __future__ import annotations

from typing import Iterable, Optional


class BoxDefaultsError(ValueError):
    """Raised when a box defaults document cannot be loaded."""

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class MissingKeyError(BoxDefaultsError):
    def __init__(self, keys: Iterable[str], *, source: Optional[str] = None) -> None:
        self.keys = list(keys)
        super().__init__(f"missing box key(s): {', '.join(self.keys)}", source=source)


class MalformedValueError(BoxDefaultsError):
    def __init__(self, key: str, reason: str, *, source: Optional[str] = None) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"malformed value for {key}: {reason}", source=source)


class UnknownBoxError(BoxDefaultsError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown box reference: {name}")
