"""Optimization pipeline: reference collection, rewrite, publishing."""

from article_optimizer.pipeline.collector import collect_references
from article_optimizer.pipeline.publisher import assemble_update, publish_article
from article_optimizer.pipeline.rewriter import RewriteEngine
from article_optimizer.pipeline.runner import ArticleOptimizer

__all__ = [
    "ArticleOptimizer",
    "RewriteEngine",
    "assemble_update",
    "collect_references",
    "publish_article",
]
