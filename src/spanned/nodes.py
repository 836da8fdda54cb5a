from __future__ import annotations

from dataclasses import dataclass, field

from .spans import Span
from .stream import TokenStream, append_tokens, tokens_of
from .tokens import Delimiter, Group, Token, TokenTree


@dataclass(frozen=True, slots=True)
class Verbatim:
    """Tokens captured as-is, emitted unchanged."""

    trees: tuple[TokenTree, ...]

    @classmethod
    def capture(cls, value: object) -> Verbatim:
        return cls(tuple(tokens_of(value)))

    def to_tokens(self, tokens: TokenStream) -> None:
        tokens.extend(self.trees)


@dataclass(frozen=True, slots=True)
class QualifiedName:
    """A dotted name such as `a.b.c`.

    `dots[i]` separates `parts[i]` and `parts[i + 1]`; `leading` is the dot of
    an absolute name, if any.
    """

    parts: tuple[Token, ...]
    dots: tuple[Token, ...] = ()
    leading: Token | None = None

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("qualified name needs at least one part")
        if len(self.dots) != len(self.parts) - 1:
            raise ValueError(f"{len(self.parts)} parts need {len(self.parts) - 1} dots, got {len(self.dots)}")

    def to_tokens(self, tokens: TokenStream) -> None:
        append_tokens(tokens, self.leading)
        for i, part in enumerate(self.parts):
            if i:
                tokens.append(self.dots[i - 1])
            tokens.append(part)

    def __str__(self) -> str:
        dot = "." if self.leading is not None else ""
        return dot + ".".join(p.lexeme for p in self.parts)


@dataclass(frozen=True, slots=True)
class Punctuated:
    """Items separated by punctuation, e.g. `a, b, c,`.

    There is one separator per gap, plus an optional trailing one.
    """

    items: tuple[object, ...] = ()
    separators: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        n = len(self.items)
        if len(self.separators) not in (max(n - 1, 0), n):
            raise ValueError(f"{n} items cannot take {len(self.separators)} separators")

    @property
    def trailing(self) -> bool:
        return bool(self.items) and len(self.separators) == len(self.items)

    def to_tokens(self, tokens: TokenStream) -> None:
        for i, item in enumerate(self.items):
            append_tokens(tokens, item)
            if i < len(self.separators):
                tokens.append(self.separators[i])


@dataclass(frozen=True, slots=True)
class Delimited:
    """A body wrapped in brackets; emitted as a single group."""

    delimiter: Delimiter
    span: Span
    body: object = field(default=None)

    def to_tokens(self, tokens: TokenStream) -> None:
        tokens.append(Group(self.delimiter, tuple(tokens_of(self.body)), self.span))


def respan(value: object, span: Span) -> Verbatim:
    """Copy of `value`'s tokens with every span replaced by `span`.

    This is how a fragment synthesized by a macro comes to carry the call site.
    """
    return Verbatim(tuple(_respan_tree(t, span) for t in tokens_of(value)))


def _respan_tree(tree: TokenTree, span: Span) -> TokenTree:
    if isinstance(tree, Token):
        return Token(tree.kind, tree.lexeme, span)
    return Group(tree.delimiter, tuple(_respan_tree(t, span) for t in tree.trees), span)
