"""Client for the content store API: read the latest article, write a partial update."""

from __future__ import annotations

import requests

from article_optimizer.errors import NoArticleError, PublishRejectedError
from article_optimizer.models import Article


class ContentStoreClient:
    """Thin wrapper over the store's `/articles` and `/updateArticle/{id}` endpoints."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_latest_article(self) -> Article:
        """Return the most recent article, or raise NoArticleError."""
        print("  -> Fetching latest article from content store...")

        resp = requests.get(
            f"{self.base_url}/articles",
            params={"per_page": 1},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()

        articles = (data.get("articles") or {}).get("data") or []
        if not data.get("success") or not articles:
            raise NoArticleError("No articles found in content store")

        article = Article.from_api(articles[0])
        print(f'  OK Found article: "{article.title}"')
        return article

    def update_article(self, article_id, payload: dict) -> dict:
        """PUT a partial update. Fields missing from `payload` stay untouched in the store.

        Raises PublishRejectedError on a non-2xx status or when the store
        answers `success: false`.
        """
        resp = requests.put(
            f"{self.base_url}/updateArticle/{article_id}",
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not resp.ok:
            raise PublishRejectedError(
                f"Content store returned HTTP {resp.status_code}: {resp.text[:300]}"
            )

        data = resp.json()
        if not data.get("success"):
            raise PublishRejectedError("Content store returned unsuccessful response")
        return data.get("data") or {}
