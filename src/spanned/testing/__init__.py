from __future__ import annotations

from .nodes import TokenList, generate_token_lists, ident, span_at

__all__ = ["TokenList", "generate_token_lists", "ident", "span_at"]
