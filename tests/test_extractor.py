"""Tests for the HTML-to-text extractor."""

import pytest
from unittest.mock import patch, Mock

import requests
from bs4 import BeautifulSoup

from article_optimizer.scraping.extractor import (
    MAX_CONTENT_CHARS,
    TRUNCATION_MARKER,
    convert_to_markdown,
    extract_content,
    normalize_content,
    scrape_article_content,
)

LONG = "This sentence is long enough to be kept by the extractor. " * 3


def _paragraphs(n, prefix="Paragraph"):
    return "".join(f"<p>{prefix} {i}: {LONG}</p>" for i in range(n))


class TestConvertToMarkdown:
    def test_converts_each_tag_type(self):
        html = """
        <div>
          <h1>Main heading of the page</h1>
          <h2>Second level heading</h2>
          <h3>Third level heading</h3>
          <h4>Fourth level heading</h4>
          <h5>Fifth level heading</h5>
          <h6>Sixth level heading</h6>
          <p>A plain paragraph of text.</p>
          <ul><li>Unordered list item one</li></ul>
          <ol><li>Ordered list item one</li></ol>
          <blockquote>Quoted words of wisdom</blockquote>
        </div>
        """
        el = BeautifulSoup(html, "html.parser").div

        lines = [line for line in convert_to_markdown(el).splitlines() if line]

        assert lines == [
            "# Main heading of the page",
            "## Second level heading",
            "### Third level heading",
            "#### Fourth level heading",
            "##### Fifth level heading",
            "##### Sixth level heading",
            "A plain paragraph of text.",
            "• Unordered list item one",
            "1. Ordered list item one",
            "> Quoted words of wisdom",
        ]

    def test_skips_short_nodes(self):
        el = BeautifulSoup("<div><p>Share</p><h2>Too short</h2><p>Long enough text here</p></div>",
                           "html.parser").div

        assert convert_to_markdown(el).strip() == "Long enough text here"

    def test_paragraph_inside_list_item_not_duplicated(self):
        el = BeautifulSoup("<div><ul><li><p>Item wrapped in a paragraph</p></li></ul></div>",
                           "html.parser").div

        assert convert_to_markdown(el).strip() == "• Item wrapped in a paragraph"

    def test_collapses_inner_whitespace(self):
        el = BeautifulSoup("<div><p>Spread   over\n   several    lines</p></div>", "html.parser").div

        assert convert_to_markdown(el).strip() == "Spread over several lines"


class TestNormalizeContent:
    def test_collapses_blank_line_runs(self):
        assert normalize_content("a\n\n\n\n\nb\n\n\nc") == "a\n\nb\n\nc"

    def test_truncates_with_marker(self):
        out = normalize_content("x" * (MAX_CONTENT_CHARS + 500))

        assert len(out) == MAX_CONTENT_CHARS + len(TRUNCATION_MARKER)
        assert out.endswith(TRUNCATION_MARKER)

    def test_leaves_short_content_alone(self):
        assert normalize_content("  short text \n") == "short text"


class TestExtractContent:
    def test_prefers_article_region(self):
        html = f"""
        <html><body>
          <div class="content">{_paragraphs(10, "Sidebar")}</div>
          <article>{_paragraphs(5, "Story")}</article>
        </body></html>
        """

        out = extract_content(html)

        assert "Story 0" in out
        assert "Sidebar" not in out

    def test_skips_region_under_threshold(self):
        html = f"""
        <html><body>
          <article><p>Only a short teaser paragraph.</p></article>
          <div class="entry-content">{_paragraphs(5, "Entry")}</div>
        </body></html>
        """

        out = extract_content(html)

        assert out.startswith("Entry 0")
        assert "teaser" not in out

    def test_falls_back_to_body(self):
        html = """
        <html><body>
          <article><p>Short teaser paragraph only.</p></article>
          <section><p>Loose body paragraph outside any region.</p></section>
        </body></html>
        """

        out = extract_content(html)

        assert "Short teaser paragraph only." in out
        assert "Loose body paragraph outside any region." in out

    def test_strips_noise(self):
        html = f"""
        <html><body><article>
          <nav><p>Navigation links that should vanish</p></nav>
          <script>var tracking = "should never appear";</script>
          <div class="related-posts"><p>Related post teaser text</p></div>
          <div class="comments"><p>Great post, thanks a lot!</p></div>
          {_paragraphs(5)}
        </article></body></html>
        """

        out = extract_content(html)

        assert "Navigation" not in out
        assert "tracking" not in out
        assert "Related post" not in out
        assert "Great post" not in out

    def test_output_bounded_and_no_blank_runs(self):
        out = extract_content(f"<html><body><article>{_paragraphs(200)}</article></body></html>")

        assert len(out) <= MAX_CONTENT_CHARS + len(TRUNCATION_MARKER)
        assert "\n\n\n" not in out

    def test_empty_document(self):
        assert extract_content("<html><body></body></html>") == ""

    def test_region_of_exactly_500_chars_is_skipped(self):
        # one node converts to "<text>\n", so 499 letters give 500 characters
        html = f"""
        <html><body>
          <article><p>{"a" * 499}</p></article>
          <div class="entry-content">{_paragraphs(5, "Entry")}</div>
        </body></html>
        """

        out = extract_content(html)

        assert out.startswith("Entry 0")
        assert "a" * 499 not in out

    def test_region_of_501_chars_is_accepted(self):
        html = f"""
        <html><body>
          <article><p>{"a" * 500}</p></article>
          <div class="entry-content">{_paragraphs(5, "Entry")}</div>
        </body></html>
        """

        out = extract_content(html)

        assert out == "a" * 500


class TestScrapeArticleContent:
    @patch("article_optimizer.scraping.extractor.requests.get")
    def test_returns_extracted_text(self, mock_get):
        mock_get.return_value = Mock(text=f"<html><body><article>{_paragraphs(5)}</article></body></html>")

        result = scrape_article_content("https://example.com/article")

        assert result.startswith("Paragraph 0")
        args, kwargs = mock_get.call_args
        assert args == ("https://example.com/article",)
        assert kwargs["timeout"] == 30
        assert "Mozilla/5.0" in kwargs["headers"]["User-Agent"]

    @patch("article_optimizer.scraping.extractor.requests.get")
    def test_returns_none_on_timeout(self, mock_get):
        mock_get.side_effect = requests.Timeout("read timed out")

        assert scrape_article_content("https://example.com/slow") is None

    @patch("article_optimizer.scraping.extractor.requests.get")
    def test_returns_none_on_http_error(self, mock_get):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
        mock_get.return_value = response

        assert scrape_article_content("https://example.com/blocked") is None

    @patch("article_optimizer.scraping.extractor.requests.get")
    def test_returns_none_when_page_has_no_text(self, mock_get):
        mock_get.return_value = Mock(text="<html><body><p>Hi</p></body></html>")

        assert scrape_article_content("https://example.com/empty") is None
