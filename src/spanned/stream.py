from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from .errors import NotTokenizableError
from .tokens import Group, Token, TokenTree


@runtime_checkable
class ToTokens(Protocol):
    """Anything that can append its lexical representation to a stream."""

    def to_tokens(self, tokens: TokenStream) -> None: ...


class TokenStream:
    """Ordered, append-only sequence of token trees."""

    __slots__ = ("_trees",)

    def __init__(self, trees: Iterable[TokenTree] = ()) -> None:
        self._trees: list[TokenTree] = list(trees)

    def append(self, tree: TokenTree) -> None:
        if not isinstance(tree, (Token, Group)):
            raise NotTokenizableError(tree)
        self._trees.append(tree)

    def extend(self, trees: Iterable[TokenTree]) -> None:
        for t in trees:
            self.append(t)

    def to_tokens(self, tokens: TokenStream) -> None:
        tokens.extend(self._trees)

    def walk(self) -> Iterator[Token]:
        """Depth-first tokens, with groups expanded into their delimiters."""
        for tree in self._trees:
            yield from _walk_tree(tree)

    def __iter__(self) -> Iterator[TokenTree]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    def __bool__(self) -> bool:
        return bool(self._trees)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenStream):
            return NotImplemented
        return self._trees == other._trees

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenStream({self._trees!r})"


def _walk_tree(tree: TokenTree) -> Iterator[Token]:
    if isinstance(tree, Token):
        yield tree
        return
    yield tree.open_token()
    for inner in tree.trees:
        yield from _walk_tree(inner)
    yield tree.close_token()


def append_tokens(tokens: TokenStream, value: object) -> None:
    """Append `value`'s tokens to `tokens`.

    Accepts token trees, `ToTokens` objects, None (emits nothing) and
    lists/tuples of those, emitted in order.
    """
    if value is None:
        return
    if isinstance(value, (Token, Group)):
        tokens.append(value)
        return
    if isinstance(value, ToTokens):
        value.to_tokens(tokens)
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            append_tokens(tokens, item)
        return
    raise NotTokenizableError(value)


def tokens_of(value: object) -> TokenStream:
    tokens = TokenStream()
    append_tokens(tokens, value)
    return tokens
