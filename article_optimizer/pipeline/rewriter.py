"""Rewrite the article with Claude, falling back through an ordered model list."""

from __future__ import annotations

import time
from typing import Optional, Sequence

import anthropic

from article_optimizer.attempts import first_success
from article_optimizer.errors import ModelInvocationError, NoModelAvailableError
from article_optimizer.models import Article, ReferenceArticle, RewriteResult
from article_optimizer.pipeline.prompts import build_rewrite_prompt


def _extract_text(message) -> str:
    """Join the text blocks of a Messages API response."""
    return "".join(
        block.text for block in message.content if getattr(block, "type", "") == "text"
    )


class RewriteEngine:
    """Send one style-transfer prompt to each model in order until one answers."""

    def __init__(
        self,
        models: Sequence[str],
        temperature: float = 0.7,
        max_tokens: int = 8000,
        api_key: str = "",
        client: Optional[anthropic.Anthropic] = None,
    ):
        if not models:
            raise ValueError("No rewrite models configured. Set REWRITE_MODELS in your .env file.")
        if client is None:
            if not api_key:
                raise ValueError("ANTHROPIC_API_KEY not set. Add it to your .env file.")
            client = anthropic.Anthropic(api_key=api_key)

        self.client = client
        self.models = list(models)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _generate(self, model: str, prompt: str) -> str:
        print(f"  -> Trying model: {model}...")
        message = self.client.messages.create(
            model=model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        text = _extract_text(message).strip()
        if not text:
            raise ModelInvocationError(f"{model} returned no text")
        return text

    def rewrite(self, article: Article, references: list[ReferenceArticle]) -> RewriteResult:
        """Return the rewritten markdown and the model that produced it.

        Raises NoModelAvailableError with one message per model when all fail.
        """
        prompt = build_rewrite_prompt(article, references)

        print(f"  -> Rewriting article ({len(self.models)} models available)...")
        start = time.time()

        model_used, body = first_success(
            [(model, lambda m=model: self._generate(m, prompt)) for model in self.models],
            label="model",
            error_cls=NoModelAvailableError,
        )

        elapsed = time.time() - start
        print(
            f"  OK Rewritten with {model_used} in {elapsed:.1f}s "
            f"({len(body.split())} words, {len(body)} characters)"
        )
        return RewriteResult(markdown_body=body, model_used=model_used)
