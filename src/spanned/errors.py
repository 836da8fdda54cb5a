from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


class SpannedError(Exception):
    """Base class for errors raised by spanned."""


@dataclass(slots=True)
class LexError(SpannedError):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class NotTokenizableError(SpannedError, TypeError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__!r} object cannot be converted to tokens")


class ConfigError(SpannedError, ValueError):
    pass
