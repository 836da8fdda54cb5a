from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .spans import Position, Span

if TYPE_CHECKING:
    from .stream import TokenStream


class TokenKind(str, Enum):
    IDENT = "IDENT"
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"
    # Any single punctuation character; the lexeme says which.
    PUNCT = "PUNCT"


class Delimiter(str, Enum):
    PAREN = "()"
    BRACKET = "[]"
    BRACE = "{}"

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    @classmethod
    def for_open(cls, ch: str) -> Delimiter | None:
        for d in cls:
            if d.open == ch:
                return d
        return None

    @classmethod
    def for_close(cls, ch: str) -> Delimiter | None:
        for d in cls:
            if d.close == ch:
                return d
        return None


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span

    def to_tokens(self, tokens: TokenStream) -> None:
        tokens.append(self)

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.lexeme!r}, {self.span.format()})"


@dataclass(frozen=True, slots=True)
class Group:
    """A delimited token tree.

    `span` covers both delimiters. A group at the top level of a stream is a
    single tree: its own span stands for everything inside it.
    """

    delimiter: Delimiter
    trees: tuple[TokenTree, ...]
    span: Span

    def to_tokens(self, tokens: TokenStream) -> None:
        tokens.append(self)

    def open_token(self) -> Token:
        s = self.span.start
        end = Position(offset=s.offset + 1, line=s.line, column=s.column + 1)
        return Token(TokenKind.PUNCT, self.delimiter.open, Span(self.span.file, s, end))

    def close_token(self) -> Token:
        e = self.span.end
        if e.offset == self.span.start.offset:
            # Zero-width (synthesized) group: both delimiters sit at the same point.
            return Token(TokenKind.PUNCT, self.delimiter.close, self.span)
        start = Position(offset=e.offset - 1, line=e.line, column=max(e.column - 1, 1))
        return Token(TokenKind.PUNCT, self.delimiter.close, Span(self.span.file, start, e))

    def __repr__(self) -> str:
        return f"Group({self.delimiter.value}, {len(self.trees)} trees, {self.span.format()})"


TokenTree = Union[Token, Group]
