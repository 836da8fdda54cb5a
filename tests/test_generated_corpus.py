from __future__ import annotations

import os

from spanned import Coverage, Settings, Span, SpanResolver
from spanned.testing import generate_token_lists


CALL_SITE = Span.call_site()


def test_generated_corpus_resolves_consistently() -> None:
    seed = int(os.environ.get("SPANNED_CORPUS_SEED", "1"))
    count = int(os.environ.get("SPANNED_CORPUS_CASES", "500"))

    on = SpanResolver(CALL_SITE, Settings(extended_span_joining=True))
    off = SpanResolver(CALL_SITE, Settings(extended_span_joining=False))

    for node in generate_token_lists(seed=seed, count=count):
        r_on = on.resolve_detailed(node)
        r_off = off.resolve_detailed(node)
        assert r_on.token_count == r_off.token_count == len(node.trees)

        if not node.trees:
            assert r_on.span == r_off.span == CALL_SITE
            assert r_on.coverage is r_off.coverage is Coverage.EMPTY
            continue

        first = node.trees[0].span
        assert r_off.span == first
        assert r_on.span.covers(first)

        foreign = sum(1 for t in node.trees if t.span.file != first.file)
        assert r_on.skipped == foreign
        assert (r_on.coverage is Coverage.PARTIAL) == (foreign > 0)
