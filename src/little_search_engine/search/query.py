"""Two-keyword "kw1 OR kw2" queries over a :class:`KeywordIndex`."""

from __future__ import annotations

from collections.abc import Iterator
import heapq
import logging

from little_search_engine.domain.search import SearchResponse
from little_search_engine.search.index import KeywordIndex
from little_search_engine.search.models import Occurrence
from little_search_engine.search.postings import PostingList


logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


def _ranked(first: PostingList, second: PostingList) -> Iterator[Occurrence]:
    # heapq.merge is stable: on equal frequency, ``first`` wins, and within
    # one list earlier entries win.
    return heapq.merge(first, second, key=lambda occ: -occ.frequency)


def top_k(index: KeywordIndex, kw1: str, kw2: str, limit: int = DEFAULT_LIMIT) -> list[str]:
    """Documents containing ``kw1`` or ``kw2``, highest frequency first.

    Ties in frequency go to ``kw1``. Within one keyword's list equal
    frequencies keep their posting order, so the earlier entry comes first.
    Each document appears once, at the position of its highest-ranked
    occurrence. At most ``limit`` documents are returned and an empty list
    means nothing matched.
    """
    kw1 = kw1.lower()
    kw2 = kw2.lower()
    first = index.get(kw1)
    second = index.get(kw2)

    if first is None and second is None:
        logger.debug("No postings for %r or %r", kw1, kw2)
        return []
    if second is None:
        logger.debug("Only %r is indexed", kw1)
        return first.documents()[:limit]
    if first is None:
        logger.debug("Only %r is indexed", kw2)
        return second.documents()[:limit]

    results: list[str] = []
    seen: set[str] = set()
    for occurrence in _ranked(first, second):
        if len(results) >= limit:
            break
        if occurrence.document in seen:
            continue
        seen.add(occurrence.document)
        results.append(occurrence.document)

    logger.debug("Query %r OR %r matched %s", kw1, kw2, results)
    return results


def top5(index: KeywordIndex, kw1: str, kw2: str) -> list[str]:
    """The five best documents for ``kw1`` OR ``kw2``."""
    return top_k(index, kw1, kw2, DEFAULT_LIMIT)


query_top5 = top5


def search(index: KeywordIndex, kw1: str, kw2: str, limit: int = DEFAULT_LIMIT) -> SearchResponse:
    """Run :func:`top_k` and wrap the documents in a :class:`SearchResponse`."""
    documents = top_k(index, kw1, kw2, limit)
    return SearchResponse(keywords=(kw1.lower(), kw2.lower()), documents=documents, total_count=len(documents))
