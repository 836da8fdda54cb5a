from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import LexError
from .spans import Position, Span
from .stream import TokenStream
from .tokens import Delimiter, Group, Token, TokenKind, TokenTree


_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INT_RE = re.compile(r"(?:0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(
    r"(?:"
    r"(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[0-9]+[eE][+-]?[0-9]+"
    r")"
)
_PUNCT = frozenset("!#$%&()*+,-./:;<=>?@[\\]^`{|}~")


@dataclass(slots=True)
class _Cursor:
    file: str
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def pos(self) -> Position:
        return Position(offset=self.i, line=self.line, column=self.col)


def tokenize(src: str, *, file: str = "<memory>") -> list[Token]:
    """Split `src` into flat tokens. Every delimiter is its own PUNCT token."""
    cur = _Cursor(file=file, src=src)
    tokens: list[Token] = []

    def make_span(start: Position, end: Position) -> Span:
        return Span(file=file, start=start, end=end)

    def error_at(start: Position, msg: str, hint: str | None = None) -> LexError:
        end = cur.pos()
        if end.offset < start.offset:
            end = start
        return LexError(span=make_span(start, end), message=msg, hint=hint)

    while not cur.eof():
        ch = cur.peek()

        if ch in " \t\r\n":
            cur.advance()
            continue

        # line comment //
        if ch == "/" and cur.peek(1) == "/":
            cur.advance(2)
            while not cur.eof() and cur.peek() != "\n":
                cur.advance()
            continue

        # block comment /* ... */
        if ch == "/" and cur.peek(1) == "*":
            start = cur.pos()
            cur.advance(2)
            while not cur.eof():
                if cur.peek() == "*" and cur.peek(1) == "/":
                    cur.advance(2)
                    break
                cur.advance()
            else:
                raise error_at(start, "unterminated block comment", hint="add closing */")
            continue

        start = cur.pos()

        if ch in "\"'":
            quote = ch
            cur.advance()
            buf: list[str] = []
            while not cur.eof():
                c = cur.peek()
                if c == quote:
                    cur.advance()
                    tokens.append(Token(TokenKind.STRING, "".join(buf), make_span(start, cur.pos())))
                    break
                if c == "\n":
                    raise error_at(start, "unterminated string literal", hint="close the quote")
                if c == "\\":
                    cur.advance()
                    esc = cur.peek()
                    if esc == "":
                        raise error_at(start, "unterminated string escape")
                    # Escapes are kept raw.
                    buf.append("\\" + esc)
                    cur.advance()
                    continue
                buf.append(c)
                cur.advance()
            else:
                raise error_at(start, "unterminated string literal", hint="close the quote")
            continue

        # float before int
        m = _FLOAT_RE.match(src, cur.i) or _INT_RE.match(src, cur.i)
        if m:
            lex = m.group(0)
            kind = TokenKind.INT if _INT_RE.fullmatch(lex) else TokenKind.FLOAT
            cur.advance(len(lex))
            tokens.append(Token(kind, lex, make_span(start, cur.pos())))
            continue

        m = _IDENT_RE.match(src, cur.i)
        if m:
            lex = m.group(0)
            cur.advance(len(lex))
            tokens.append(Token(TokenKind.IDENT, lex, make_span(start, cur.pos())))
            continue

        if ch in _PUNCT:
            cur.advance()
            tokens.append(Token(TokenKind.PUNCT, ch, make_span(start, cur.pos())))
            continue

        raise error_at(
            start,
            f"unexpected character {ch!r}",
            hint="only ASCII identifiers, numbers, strings and punctuation are recognized",
        )

    return tokens


def lex(src: str, *, file: str = "<memory>") -> TokenStream:
    """Tokenize `src` and nest bracket pairs into groups."""
    # Each frame: (delimiter, open token, trees collected so far).
    stack: list[tuple[Delimiter | None, Token | None, list[TokenTree]]] = [(None, None, [])]

    for tok in tokenize(src, file=file):
        if tok.kind is TokenKind.PUNCT:
            opening = Delimiter.for_open(tok.lexeme)
            if opening is not None:
                stack.append((opening, tok, []))
                continue
            closing = Delimiter.for_close(tok.lexeme)
            if closing is not None:
                delim, open_tok, trees = stack[-1]
                if delim is None or open_tok is None:
                    raise LexError(
                        span=tok.span,
                        message=f"unexpected closing delimiter {tok.lexeme!r}",
                        hint="remove it or add the matching opening delimiter",
                    )
                if closing is not delim:
                    raise LexError(
                        span=tok.span,
                        message=f"mismatched closing delimiter {tok.lexeme!r}",
                        hint=f"the {delim.open!r} at {open_tok.span.format()} expects {delim.close!r}",
                    )
                stack.pop()
                span = Span(file=file, start=open_tok.span.start, end=tok.span.end)
                stack[-1][2].append(Group(delim, tuple(trees), span))
                continue
        stack[-1][2].append(tok)

    if len(stack) > 1:
        delim, open_tok, _ = stack[-1]
        assert delim is not None and open_tok is not None
        raise LexError(
            span=open_tok.span,
            message=f"unclosed delimiter {delim.open!r}",
            hint=f"add a closing {delim.close!r}",
        )
    return TokenStream(stack[0][2])
