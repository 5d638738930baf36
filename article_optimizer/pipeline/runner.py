"""Orchestrate one optimization run end to end.

Steps:
1. Fetch the latest article from the content store
2. Find top-ranking competitors and scrape two of them
3. Rewrite the article in their style (ordered model fallback)
4. Assemble the partial update and publish it (exactly once)
5. Save a local markdown copy
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Optional

from article_optimizer.config import Settings
from article_optimizer.models import Article, ArticleUpdate, RunSummary
from article_optimizer.pipeline.collector import collect_references
from article_optimizer.pipeline.publisher import assemble_update, publish_article
from article_optimizer.pipeline.rewriter import RewriteEngine
from article_optimizer.scraping import scrape_article_content
from article_optimizer.search import CompetitorFinder
from article_optimizer.store import ContentStoreClient


class ArticleOptimizer:
    """Runs the pipeline for one article. Collaborators can be injected for tests."""

    def __init__(
        self,
        settings: Settings,
        store: Optional[ContentStoreClient] = None,
        finder: Optional[CompetitorFinder] = None,
        engine: Optional[RewriteEngine] = None,
        scrape: Optional[Callable[[str], Optional[str]]] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.settings = settings
        self.store = store or ContentStoreClient(
            settings.content_api_url, timeout=settings.store_timeout
        )
        self.finder = finder or CompetitorFinder(
            api_key=settings.google_api_key,
            engine_id=settings.google_search_engine_id,
            num_results=settings.search_num_results,
            limit=settings.max_competitors,
            headless=settings.browser_headless,
        )
        self._engine = engine
        self.scrape = scrape or (
            lambda url: scrape_article_content(url, timeout=settings.scrape_timeout)
        )
        self.clock = clock

    @property
    def engine(self) -> RewriteEngine:
        # Built on first use so a missing API key only fails once a rewrite is needed
        if self._engine is None:
            self._engine = RewriteEngine(
                models=self.settings.rewrite_models,
                temperature=self.settings.rewrite_temperature,
                max_tokens=self.settings.rewrite_max_tokens,
                api_key=self.settings.anthropic_api_key,
            )
        return self._engine

    def save_article(self, article: Article, update: ArticleUpdate) -> Path:
        """Write the final markdown to <output_dir>/<article id>.md."""
        output_dir = Path(self.settings.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / f"{article.id}.md"
        path.write_text(f"# {update.title}\n\n{update.content}", encoding="utf-8")
        print(f"  OK Saved to {path}")
        return path

    def run(self, dry_run: bool = False, save: bool = True) -> RunSummary:
        """Optimize the latest article. Any unrecovered error propagates to the caller."""
        # ── 1. Latest article ──────────────────────────────────────────────
        article = self.store.fetch_latest_article()
        summary = RunSummary(article_id=article.id, original_title=article.title)

        # ── 2. Competitor references ───────────────────────────────────────
        references = collect_references(
            article.title,
            finder=self.finder,
            scrape=self.scrape,
            required=self.settings.required_references,
        )
        summary.references = references

        # ── 3. Rewrite ─────────────────────────────────────────────────────
        result = self.engine.rewrite(article, references)
        summary.model_used = result.model_used

        # ── 4. Assemble + publish ──────────────────────────────────────────
        update = assemble_update(article, result.markdown_body, references, clock=self.clock)
        summary.new_title = update.title
        summary.payload_keys = list(update.payload)
        summary.content_length = len(update.content)

        if dry_run:
            print("\n  [DRY RUN] Would send fields: " + ", ".join(update.payload))
        else:
            publish_article(self.store, article, update)
            summary.published = True

        # ── 5. Local copy (best effort, never blocks publishing) ───────────
        if save:
            try:
                summary.saved_path = self.save_article(article, update)
            except OSError as e:
                print(f"  WARNING: could not save local copy: {e}")
        return summary
