"""Primary competitor search via the Google Custom Search JSON API."""

from __future__ import annotations

from article_optimizer.errors import NoResultsError
from article_optimizer.models import SearchResult


def build_search_service(api_key: str):
    """Build a Custom Search API service object."""
    # Lazy import: only needed when the primary search path actually runs
    from googleapiclient.discovery import build

    return build("customsearch", "v1", developerKey=api_key, cache_discovery=False)


def search_custom_search(
    service,
    query: str,
    engine_id: str,
    num: int = 10,
) -> list[SearchResult]:
    """Run one query and return the raw items in provider order.

    Raises NoResultsError when the provider returns no items at all.
    """
    response = service.cse().list(q=query, cx=engine_id, num=num).execute()

    items = response.get("items") or []
    if not items:
        raise NoResultsError(f'No search results found for "{query}"')

    return [
        SearchResult(
            title=item.get("title", ""),
            url=item.get("link", ""),
            snippet=item.get("snippet", ""),
        )
        for item in items
    ]
