"""Turn model output into the store's partial-update payload and submit it."""

from __future__ import annotations

import re
from datetime import date
from typing import Callable

from article_optimizer.models import Article, ArticleUpdate, ReferenceArticle
from article_optimizer.store import ContentStoreClient

TITLE_RE = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
HORIZONTAL_RULE_RE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")

EXCERPT_MAX_CHARS = 250

# Copied from the source article only when it has a value
OPTIONAL_ARTICLE_FIELDS = ("image", "image_alt", "author_name", "author_url")


def split_title(markdown: str, fallback: str = "") -> tuple[str, str]:
    """Pull the first `# Title` line out of `markdown`.

    Returns (title, body_without_that_line). Without a level-1 heading the
    fallback title is used and the body is returned whole.
    """
    match = TITLE_RE.search(markdown)
    if not match:
        return fallback, markdown.strip()
    body = markdown[: match.start()] + markdown[match.end():]
    return match.group(1).strip(), body.strip()


def format_date(day: date) -> str:
    return f"{day:%B} {day.day}, {day.year}"


def add_references(content: str, references: list[ReferenceArticle], today: date) -> str:
    """Append the References section with links to the competitor articles."""
    links = "\n".join(
        f"{i}. [{ref.title}]({ref.url})" for i, ref in enumerate(references, 1)
    )
    return f"""{content}

---

## References

This article was optimized based on analysis of top-ranking content:

{links}

*Last updated: {format_date(today)}*
"""


def derive_excerpt(content: str, max_chars: int = EXCERPT_MAX_CHARS) -> str:
    """First non-empty line that is not a heading or a rule, cut to `max_chars`."""
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or HORIZONTAL_RULE_RE.match(line):
            continue
        return line[:max_chars]
    return ""


def build_update_payload(
    article: Article,
    content: str,
    excerpt: str,
    references: list[ReferenceArticle],
    today: date,
) -> dict:
    """Build the partial update. Falsy values get no key at all, so the store keeps its own."""
    payload: dict = {}

    if excerpt:
        payload["excerpt"] = excerpt
    if content:
        payload["full_content"] = content

    payload["is_optimized"] = True
    # Reference text is never persisted, only where it came from
    payload["reference_articles"] = [{"title": ref.title, "url": ref.url} for ref in references]
    payload["optimized_at"] = today.isoformat()

    for field_name in OPTIONAL_ARTICLE_FIELDS:
        value = getattr(article, field_name)
        if value:
            payload[field_name] = value

    return payload


def assemble_update(
    article: Article,
    markdown_body: str,
    references: list[ReferenceArticle],
    clock: Callable[[], date] = date.today,
) -> ArticleUpdate:
    """Derive title, final content and excerpt from the rewrite and build the payload."""
    today = clock()
    title, body = split_title(markdown_body, fallback=article.title)
    content = add_references(body, references, today)
    excerpt = derive_excerpt(body)
    payload = build_update_payload(article, content, excerpt, references, today)
    return ArticleUpdate(title=title, content=content, excerpt=excerpt, payload=payload)


def publish_article(store: ContentStoreClient, article: Article, update: ArticleUpdate) -> dict:
    """Send the payload once. PublishRejectedError from the store propagates; no retry."""
    print("  -> Publishing updated article via API...")
    print(f"     Sending fields: {', '.join(update.payload)}")
    updated = store.update_article(article.id, update.payload)
    print("  OK Article updated successfully")
    return updated
