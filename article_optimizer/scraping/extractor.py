"""Fetch a competitor page and convert its main content region to markdown-style text."""

from __future__ import annotations

import re
from typing import Optional

import requests
from bs4 import BeautifulSoup, Tag

from article_optimizer.config import SCRAPE_TIMEOUT, USER_AGENT

# Subtrees that never carry article text
NOISE_SELECTORS = (
    "script, style, nav, header, footer, aside, "
    ".advertisement, .ad, .social-share, .comments, .related-posts"
)

# Content regions in priority order; `body` is the last resort
CONTENT_SELECTORS = [
    "article",
    ".post-content",
    ".entry-content",
    ".article-content",
    ".content",
    "main",
    '[role="main"]',
]

CONVERTED_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "blockquote"]

HEADING_PREFIX = {
    "h1": "# ",
    "h2": "## ",
    "h3": "### ",
    "h4": "#### ",
    "h5": "##### ",
    "h6": "##### ",
}

MIN_NODE_CHARS = 10  # shorter nodes are buttons, bylines, labels
MIN_REGION_CHARS = 500
MAX_CONTENT_CHARS = 8000
TRUNCATION_MARKER = "..."


def _clean_text(text: str) -> str:
    """Normalize whitespace and strip."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def _parent_name(el: Tag) -> str:
    return el.parent.name if el.parent is not None else ""


def convert_to_markdown(element: Tag) -> str:
    """Walk headings, paragraphs, list items and quotes under `element` in document order."""
    parts: list[str] = []

    for el in element.find_all(CONVERTED_TAGS):
        text = _clean_text(el.get_text())
        if len(text) < MIN_NODE_CHARS:
            continue

        tag = el.name
        if tag in HEADING_PREFIX:
            parts.append(f"{HEADING_PREFIX[tag]}{text}\n")
        elif tag == "p":
            # list item text is already emitted by the <li> itself
            if _parent_name(el) != "li":
                parts.append(f"{text}\n")
        elif tag == "li":
            prefix = "1. " if _parent_name(el) == "ol" else "• "
            parts.append(f"{prefix}{text}\n")
        elif tag == "blockquote":
            parts.append(f"> {text}\n")

    return "\n".join(parts)


def normalize_content(content: str) -> str:
    """Collapse runs of blank lines, trim, and cap the length."""
    content = re.sub(r"\n{3,}", "\n\n", content).strip()
    if len(content) > MAX_CONTENT_CHARS:
        content = content[:MAX_CONTENT_CHARS] + TRUNCATION_MARKER
    return content


def extract_content(html: str) -> str:
    """Convert the first content region longer than 500 chars, else the whole body."""
    soup = BeautifulSoup(html, "html.parser")

    for el in soup.select(NOISE_SELECTORS):
        el.decompose()

    for selector in CONTENT_SELECTORS:
        region = soup.select_one(selector)
        if region is None:
            continue
        content = convert_to_markdown(region)
        if len(content) > MIN_REGION_CHARS:
            return normalize_content(content)

    body = soup.body or soup
    return normalize_content(convert_to_markdown(body))


def scrape_article_content(url: str, timeout: int = SCRAPE_TIMEOUT) -> Optional[str]:
    """Fetch `url` and return its extracted text, or None if the page can't be used.

    Failures are reported and swallowed so the caller can move on to the
    next candidate.
    """
    print(f"  -> Scraping content from: {url}")

    try:
        resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"  FAILED scraping {url}: {e}")
        return None

    content = extract_content(resp.text)
    if not content:
        print(f"  FAILED scraping {url}: no readable text")
        return None

    print(f"  OK Scraped {len(content)} characters")
    return content
