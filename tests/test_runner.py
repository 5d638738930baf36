"""End-to-end tests for the orchestrator with fake collaborators."""

from datetime import date

import pytest
from unittest.mock import MagicMock, Mock

from article_optimizer.config import Settings
from article_optimizer.errors import (
    InsufficientReferencesError,
    NoArticleError,
    NoModelAvailableError,
    PublishRejectedError,
)
from article_optimizer.models import Article, SearchResult
from article_optimizer.pipeline.rewriter import RewriteEngine
from article_optimizer.pipeline.runner import ArticleOptimizer

ARTICLE = Article(id=5, title="Best Coffee Makers 2024", content="Old body", image="cover.jpg")


def _message(text):
    return Mock(content=[Mock(type="text", text=text)])


@pytest.fixture
def store():
    store = Mock()
    store.fetch_latest_article.return_value = ARTICLE
    store.update_article.return_value = {"id": 5}
    return store


@pytest.fixture
def finder():
    finder = Mock()
    finder.find.return_value = [
        SearchResult("Ref One", "https://one.com"),
        SearchResult("Ref Two", "https://two.com"),
        SearchResult("Ref Three", "https://three.com"),
    ]
    return finder


@pytest.fixture
def engine():
    client = MagicMock()
    client.messages.create.side_effect = [RuntimeError("quota"), _message("# New Title\n\nIntro text...")]
    return RewriteEngine(["A", "B"], client=client)


def _optimizer(tmp_path, store, finder, engine, scrape=None):
    return ArticleOptimizer(
        Settings(output_dir=tmp_path),
        store=store,
        finder=finder,
        engine=engine,
        scrape=scrape or (lambda url: f"text from {url}"),
        clock=lambda: date(2026, 10, 18),
    )


class TestArticleOptimizer:
    def test_full_run_publishes_once(self, tmp_path, store, finder, engine):
        summary = _optimizer(tmp_path, store, finder, engine).run()

        finder.find.assert_called_once_with("Best Coffee Makers 2024")
        store.update_article.assert_called_once()
        article_id, payload = store.update_article.call_args.args
        assert article_id == 5
        assert payload["excerpt"] == "Intro text..."
        assert payload["image"] == "cover.jpg"
        assert payload["optimized_at"] == "2026-10-18"
        assert [r["url"] for r in payload["reference_articles"]] == ["https://one.com", "https://two.com"]
        assert summary.published
        assert summary.model_used == "B"
        assert summary.new_title == "New Title"

    def test_saves_markdown_copy(self, tmp_path, store, finder, engine):
        summary = _optimizer(tmp_path, store, finder, engine).run()

        assert summary.saved_path == tmp_path / "5.md"
        saved = summary.saved_path.read_text(encoding="utf-8")
        assert saved.startswith("# New Title\n\nIntro text...")
        assert "## References" in saved

    def test_dry_run_never_writes_to_store(self, tmp_path, store, finder, engine):
        summary = _optimizer(tmp_path, store, finder, engine).run(dry_run=True, save=False)

        store.update_article.assert_not_called()
        assert not summary.published
        assert summary.saved_path is None
        assert "full_content" in summary.payload_keys

    def test_no_article_aborts_before_search(self, tmp_path, store, finder, engine):
        store.fetch_latest_article.side_effect = NoArticleError("empty")

        with pytest.raises(NoArticleError):
            _optimizer(tmp_path, store, finder, engine).run()

        finder.find.assert_not_called()

    def test_insufficient_references_aborts_before_rewrite(self, tmp_path, store, finder):
        engine = Mock()

        with pytest.raises(InsufficientReferencesError):
            _optimizer(tmp_path, store, finder, engine, scrape=lambda url: None).run()

        engine.rewrite.assert_not_called()
        store.update_article.assert_not_called()

    def test_no_model_available_means_no_publish(self, tmp_path, store, finder):
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("down")
        engine = RewriteEngine(["A", "B"], client=client)

        with pytest.raises(NoModelAvailableError):
            _optimizer(tmp_path, store, finder, engine).run()

        store.update_article.assert_not_called()

    def test_publish_rejection_propagates_without_retry(self, tmp_path, store, finder, engine):
        store.update_article.side_effect = PublishRejectedError("success false")

        with pytest.raises(PublishRejectedError):
            _optimizer(tmp_path, store, finder, engine).run()

        assert store.update_article.call_count == 1

    def test_failed_local_save_does_not_block_publish(self, tmp_path, store, finder, engine, capsys):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x", encoding="utf-8")
        optimizer = ArticleOptimizer(
            Settings(output_dir=blocker / "sub"),
            store=store,
            finder=finder,
            engine=engine,
            scrape=lambda url: f"text from {url}",
            clock=lambda: date(2026, 10, 18),
        )

        summary = optimizer.run()

        store.update_article.assert_called_once()
        assert summary.published
        assert summary.saved_path is None
        assert "WARNING: could not save local copy" in capsys.readouterr().out

    def test_saves_after_publishing(self, tmp_path, store, finder, engine):
        def update_article(article_id, payload):
            assert not (tmp_path / "5.md").exists()
            return {"id": article_id}

        store.update_article.side_effect = update_article

        summary = _optimizer(tmp_path, store, finder, engine).run()

        assert summary.saved_path.exists()


class TestSettings:
    def test_default_output_dir_is_relative_to_working_directory(self):
        assert not Settings().output_dir.is_absolute()
        assert Settings().output_dir.parts == ("output", "articles")
