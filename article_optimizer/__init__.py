"""Unattended article optimizer: rewrite the latest article in the style of top-ranking competitors.

Package structure:
    article_optimizer/config.py     – API endpoints, keys, model list, generation settings
    article_optimizer/store.py      – content store client (latest article, partial update)
    article_optimizer/search/       – competitor discovery (Custom Search API, browser fallback, denylist)
    article_optimizer/scraping/     – competitor page fetch and HTML-to-markdown extraction
    article_optimizer/pipeline/     – reference collection, rewrite with model fallback, publishing
"""
