from __future__ import annotations

from pathlib import Path

from .config import Settings
from .lexer import lex
from .resolver import Resolution, SpanResolver
from .spans import Span
from .stream import TokenStream


def span_of(node: object, *, call_site: Span, settings: Settings | None = None) -> Span:
    """Span covering everything `node` emits, or `call_site` if it emits nothing."""
    return SpanResolver(call_site, settings).resolve(node)


def resolution_of(node: object, *, call_site: Span, settings: Settings | None = None) -> Resolution:
    """Like `span_of`, but also reports how much of the output the span covers."""
    return SpanResolver(call_site, settings).resolve_detailed(node)


def lex_source(src: str, *, file: str = "<memory>") -> TokenStream:
    return lex(src, file=file)


def lex_file(path: str | Path) -> TokenStream:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding="utf-8")
    return lex_source(src, file=str(p))
