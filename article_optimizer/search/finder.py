"""Find the top-ranking competitor articles for a topic."""

from __future__ import annotations

from article_optimizer.attempts import first_success
from article_optimizer.errors import SearchUnavailableError
from article_optimizer.models import SearchResult
from article_optimizer.search.browser_search import search_with_browser
from article_optimizer.search.custom_search import build_search_service, search_custom_search
from article_optimizer.search.filters import (
    BROWSER_DENYLIST,
    SEARCH_API_DENYLIST,
    filter_candidates,
)


class CompetitorFinder:
    """Search API first; if it raises (including no results), scrape a rendered results page.

    Output order is the provider's ranking after denylist filtering; nothing
    is re-ranked.
    """

    def __init__(
        self,
        api_key: str = "",
        engine_id: str = "",
        num_results: int = 10,
        limit: int = 2,
        headless: bool = True,
        service=None,
        browser_search=search_with_browser,
    ):
        self.api_key = api_key
        self.engine_id = engine_id
        self.num_results = num_results
        self.limit = limit
        self.headless = headless
        self._service = service
        self._browser_search = browser_search

    @property
    def service(self):
        if self._service is None:
            if not self.api_key or not self.engine_id:
                raise ValueError(
                    "GOOGLE_API_KEY / GOOGLE_SEARCH_ENGINE_ID not set. Add them to your .env file."
                )
            self._service = build_search_service(self.api_key)
        return self._service

    def search_api(self, query: str) -> list[SearchResult]:
        results = search_custom_search(
            self.service, query, self.engine_id, num=self.num_results
        )
        return filter_candidates(results, SEARCH_API_DENYLIST, self.limit)

    def search_browser(self, query: str) -> list[SearchResult]:
        print("  .. Trying fallback search with headless browser...")
        results = self._browser_search(query, headless=self.headless)
        return filter_candidates(results, BROWSER_DENYLIST, self.limit)

    def find(self, query: str) -> list[SearchResult]:
        """Return up to `limit` competitor results for `query`, best-ranked first."""
        print(f'  -> Searching for: "{query}"')

        strategy, links = first_success(
            [
                ("search-api", lambda: self.search_api(query)),
                ("browser", lambda: self.search_browser(query)),
            ],
            label="search",
            error_cls=SearchUnavailableError,
        )

        print(f"  OK Found {len(links)} article links ({strategy}):")
        for i, link in enumerate(links, 1):
            print(f"     {i}. {link.title}")
            print(f"        {link.url}")
        return links
