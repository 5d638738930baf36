"""Competitor page scraping and HTML-to-text extraction."""

from article_optimizer.scraping.extractor import (
    convert_to_markdown,
    extract_content,
    scrape_article_content,
)

__all__ = ["convert_to_markdown", "extract_content", "scrape_article_content"]
