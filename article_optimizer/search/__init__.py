"""Competitor discovery: Custom Search API first, headless browser as fallback."""

from article_optimizer.search.finder import CompetitorFinder
from article_optimizer.search.filters import filter_candidates, is_denied

__all__ = ["CompetitorFinder", "filter_candidates", "is_denied"]
