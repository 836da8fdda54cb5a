"""Reduce a node's token output to the one span that covers it.

A node is tokenized into a fresh stream and the spans of its top-level token
trees are folded together. With extended span joining off, only the first
tree counts; with it on, every tree whose span can be joined with the running
result widens it, and trees whose spans cannot be joined (different files)
are skipped. A node that emits nothing resolves to the call site.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .config import Settings, get_settings
from .spans import Span
from .stream import tokens_of


logger = logging.getLogger(__name__)


class Coverage(str, Enum):
    # Nothing was emitted; the span is the call site.
    EMPTY = "empty"
    FULL = "full"
    # Joining on, but some trees could not be joined.
    PARTIAL = "partial"
    # Joining off and the node emitted more than one tree.
    FIRST_TOKEN = "first-token"


@dataclass(frozen=True, slots=True)
class Resolution:
    span: Span
    coverage: Coverage
    token_count: int
    skipped: int = 0

    @property
    def is_partial(self) -> bool:
        return self.coverage in (Coverage.PARTIAL, Coverage.FIRST_TOKEN)


class SpanResolver:
    """Resolves nodes against one call site and one set of settings."""

    __slots__ = ("call_site", "settings")

    def __init__(self, call_site: Span, settings: Settings | None = None) -> None:
        self.call_site = call_site
        self.settings = get_settings() if settings is None else settings

    def resolve(self, node: object) -> Span:
        return self.resolve_detailed(node).span

    def resolve_detailed(self, node: object) -> Resolution:
        trees = list(tokens_of(node))
        if not trees:
            return Resolution(span=self.call_site, coverage=Coverage.EMPTY, token_count=0)

        span = trees[0].span
        if len(trees) == 1:
            return Resolution(span=span, coverage=Coverage.FULL, token_count=1)
        if not self.settings.extended_span_joining:
            return Resolution(span=span, coverage=Coverage.FIRST_TOKEN, token_count=len(trees))

        skipped = 0
        for tree in trees[1:]:
            joined = span.join(tree.span)
            if joined is None:
                skipped += 1
                logger.debug("cannot join %s with %s; skipping", span.format(), tree.span.format())
                continue
            span = joined

        coverage = Coverage.PARTIAL if skipped else Coverage.FULL
        return Resolution(span=span, coverage=coverage, token_count=len(trees), skipped=skipped)
