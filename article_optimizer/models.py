"""Records passed between the pipeline steps. None of them outlive a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Article:
    """Read-only snapshot of the article being optimized."""

    id: int | str
    title: str
    content: str = ""
    excerpt: str = ""
    image: Optional[str] = None
    image_alt: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "Article":
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            content=data.get("content") or data.get("full_content") or "",
            excerpt=data.get("excerpt") or "",
            image=data.get("image"),
            image_alt=data.get("image_alt"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
        )

    @property
    def body(self) -> str:
        """Full content when the store has it, otherwise the excerpt."""
        return self.content or self.excerpt


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    snippet: str = ""


@dataclass(frozen=True)
class ReferenceArticle:
    title: str
    url: str
    content: str

    @classmethod
    def from_result(cls, result: SearchResult, content: str) -> "ReferenceArticle":
        return cls(title=result.title, url=result.url, content=content)


@dataclass(frozen=True)
class RewriteResult:
    markdown_body: str
    model_used: str


@dataclass(frozen=True)
class ArticleUpdate:
    """Assembled rewrite: derived title plus the partial-update payload."""

    title: str
    content: str
    excerpt: str
    payload: dict


@dataclass
class RunSummary:
    article_id: int | str
    original_title: str
    new_title: str = ""
    references: list[ReferenceArticle] = field(default_factory=list)
    model_used: str = ""
    payload_keys: list[str] = field(default_factory=list)
    content_length: int = 0
    saved_path: Optional[Path] = None
    published: bool = False
