from __future__ import annotations

from .api import lex_file, lex_source, resolution_of, span_of
from .config import Settings, configure, get_settings
from .errors import ConfigError, LexError, NotTokenizableError, SpannedError
from .resolver import Coverage, Resolution, SpanResolver
from .spans import Position, Span
from .stream import ToTokens, TokenStream, append_tokens, tokens_of
from .tokens import Delimiter, Group, Token, TokenKind

__all__ = [
    "ConfigError",
    "Coverage",
    "Delimiter",
    "Group",
    "LexError",
    "NotTokenizableError",
    "Position",
    "Resolution",
    "Settings",
    "Span",
    "SpanResolver",
    "SpannedError",
    "ToTokens",
    "Token",
    "TokenKind",
    "TokenStream",
    "append_tokens",
    "configure",
    "get_settings",
    "lex_file",
    "lex_source",
    "resolution_of",
    "span_of",
    "tokens_of",
]
