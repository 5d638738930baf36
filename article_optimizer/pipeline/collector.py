"""Assemble the reference set: competitor URLs plus their scraped text."""

from __future__ import annotations

from typing import Callable, Optional

from article_optimizer.errors import InsufficientCandidatesError, InsufficientReferencesError
from article_optimizer.models import ReferenceArticle
from article_optimizer.scraping import scrape_article_content
from article_optimizer.search import CompetitorFinder


def collect_references(
    topic: str,
    finder: CompetitorFinder,
    scrape: Callable[[str], Optional[str]] = scrape_article_content,
    required: int = 2,
) -> list[ReferenceArticle]:
    """Scan candidates in ranking order and stop once `required` pages scraped cleanly.

    Candidates whose scrape returns nothing are skipped. Raises
    InsufficientCandidatesError when search finds fewer than `required`
    URLs and InsufficientReferencesError when too few of them scrape.
    """
    candidates = finder.find(topic)
    if len(candidates) < required:
        raise InsufficientCandidatesError(
            f"Found {len(candidates)} competitor articles, need {required}"
        )

    print("  -> Scraping reference articles...")
    references: list[ReferenceArticle] = []
    for candidate in candidates:
        content = scrape(candidate.url)
        if content:
            references.append(ReferenceArticle.from_result(candidate, content))
        if len(references) >= required:
            break

    if len(references) < required:
        raise InsufficientReferencesError(
            f"Scraped {len(references)} of {required} required reference articles"
        )
    return references
