from __future__ import annotations

from pathlib import Path

import pytest

from spanned import Group, LexError, Position, Span, TokenKind, lex_file, lex_source
from spanned.lexer import tokenize
from spanned.tokens import Delimiter


def test_tokenize_kinds_and_spans() -> None:
    toks = tokenize('foo(1, "x") 2.5e3', file="t.src")
    assert [(t.kind, t.lexeme) for t in toks] == [
        (TokenKind.IDENT, "foo"),
        (TokenKind.PUNCT, "("),
        (TokenKind.INT, "1"),
        (TokenKind.PUNCT, ","),
        (TokenKind.STRING, "x"),
        (TokenKind.PUNCT, ")"),
        (TokenKind.FLOAT, "2.5e3"),
    ]
    assert toks[4].span == Span("t.src", Position(7, 1, 8), Position(10, 1, 11))


def test_comments_are_skipped_and_lines_tracked() -> None:
    toks = tokenize("a // one\n/* two\n */  b", file="c.src")
    assert [t.lexeme for t in toks] == ["a", "b"]
    assert toks[1].span.start == Position(offset=21, line=3, column=6)


def test_dotted_name_is_not_a_float() -> None:
    toks = tokenize("x.y .5")
    assert [(t.kind, t.lexeme) for t in toks] == [
        (TokenKind.IDENT, "x"),
        (TokenKind.PUNCT, "."),
        (TokenKind.IDENT, "y"),
        (TokenKind.FLOAT, ".5"),
    ]


def test_lex_nests_groups() -> None:
    stream = lex_source("f(a, [b]) { }", file="g.src")
    trees = list(stream)
    assert len(trees) == 3
    paren, brace = trees[1], trees[2]
    assert isinstance(paren, Group) and paren.delimiter is Delimiter.PAREN
    assert paren.span.start.offset == 1 and paren.span.end.offset == 9
    inner = paren.trees[-1]
    assert isinstance(inner, Group) and inner.delimiter is Delimiter.BRACKET
    assert isinstance(brace, Group) and brace.trees == ()


def test_walk_expands_groups_into_delimiters() -> None:
    stream = lex_source("f(a, [b])", file="w.src")
    assert [t.lexeme for t in stream.walk()] == [t.lexeme for t in tokenize("f(a, [b])", file="w.src")]
    assert list(stream.walk()) == tokenize("f(a, [b])", file="w.src")


@pytest.mark.parametrize(
    ("src", "message"),
    [
        ('"abc', "unterminated string literal"),
        ("/* abc", "unterminated block comment"),
        ("a é", "unexpected character"),
        ("(a]", "mismatched closing delimiter"),
        ("a)", "unexpected closing delimiter"),
        ("{(a)", "unclosed delimiter '{'"),
    ],
)
def test_lex_errors(src: str, message: str) -> None:
    with pytest.raises(LexError) as e:
        lex_source(src, file="e.src")
    assert message in str(e.value)
    assert "e.src:1:" in str(e.value)


def test_mismatch_hint_points_at_opening_delimiter() -> None:
    with pytest.raises(LexError) as e:
        lex_source("x (\n a ]", file="m.src")
    assert e.value.span.format() == "m.src:2:4"
    assert e.value.hint is not None and "m.src:1:3" in e.value.hint


def test_lex_file(tmp_path: Path) -> None:
    p = tmp_path / "in.src"
    p.write_text("call(x)", encoding="utf-8")
    stream = lex_file(p)
    first = next(iter(stream))
    assert first.span.file == str(p.resolve())
    assert len(stream) == 2
