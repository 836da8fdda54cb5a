from __future__ import annotations

from dataclasses import dataclass


CALL_SITE_FILE = "<call-site>"


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based; line/column are 1-based for user-facing messages.
    """

    offset: int
    line: int
    column: int


_ORIGIN = Position(offset=0, line=1, column=1)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    file: str
    start: Position
    end: Position

    @classmethod
    def at(cls, file: str, pos: Position) -> Span:
        return cls(file=file, start=pos, end=pos)

    @classmethod
    def call_site(cls, label: str = CALL_SITE_FILE) -> Span:
        """Zero-width span for hosts without a real invocation location."""
        return cls.at(label, _ORIGIN)

    @property
    def width(self) -> int:
        return self.end.offset - self.start.offset

    def join(self, other: Span) -> Span | None:
        """Smallest span covering both, or None when they live in different files."""
        if other.file != self.file:
            return None
        start = self.start if self.start.offset <= other.start.offset else other.start
        end = self.end if self.end.offset >= other.end.offset else other.end
        return Span(file=self.file, start=start, end=end)

    def covers(self, other: Span) -> bool:
        return (
            other.file == self.file
            and self.start.offset <= other.start.offset
            and other.end.offset <= self.end.offset
        )

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"
