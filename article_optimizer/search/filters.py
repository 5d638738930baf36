"""Denylist filtering of competitor candidates.

Pure functions over an ordered sequence of results: drop anything matching
the denylist, then keep the first N in the order the source returned them.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Sequence

from article_optimizer.models import SearchResult

# Social/video platforms, PDFs and explicit video paths never make good style references.
SEARCH_API_DENYLIST = (
    "youtube.com",
    "facebook.com",
    "twitter.com",
    "instagram.com",
    "linkedin.com",
    "reddit.com",
    "pinterest.com",
    ".pdf",
    "/video/",
    "/watch",
)

BROWSER_DENYLIST = (
    "youtube.com",
    "facebook.com",
    "twitter.com",
    "instagram.com",
    "linkedin.com",
    "reddit.com",
    ".pdf",
    "/video/",
    "/watch",
)


def is_denied(url: str, denylist: Sequence[str]) -> bool:
    """True if any denylist pattern appears in the URL (case-insensitive)."""
    lowered = url.lower()
    return any(pattern in lowered for pattern in denylist)


def filter_candidates(
    results: Iterable[SearchResult],
    denylist: Sequence[str],
    limit: int = 2,
) -> list[SearchResult]:
    """Drop denied URLs and take the first `limit` survivors, keeping source order."""
    allowed = (r for r in results if r.url and not is_denied(r.url, denylist))
    return list(islice(allowed, limit))
