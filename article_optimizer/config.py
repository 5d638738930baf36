"""Central configuration for the article optimization pipeline."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
# Relative to the working directory the run is started from
ARTICLE_OUTPUT_DIR = Path("output") / "articles"

# ── Content store (article list/detail + partial update API) ──────────────
CONTENT_API_URL = os.getenv(
    "CONTENT_API_URL", os.getenv("LARAVEL_API_URL", "http://localhost:8000/api")
)
STORE_TIMEOUT = 30

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")
GOOGLE_SEARCH_ENGINE_ID = os.getenv("GOOGLE_SEARCH_ENGINE_ID", "")

# ── Claude settings ────────────────────────────────────────────────────────
# Tried in order until one answers.
DEFAULT_REWRITE_MODELS = [
    "claude-sonnet-4-5-20250929",
    "claude-opus-4-6",
    "claude-haiku-4-5-20251001",
]
REWRITE_MODELS = [
    m.strip() for m in os.getenv("REWRITE_MODELS", "").split(",") if m.strip()
] or DEFAULT_REWRITE_MODELS
REWRITE_TEMPERATURE = float(os.getenv("REWRITE_TEMPERATURE", "0.7"))
REWRITE_MAX_TOKENS = int(os.getenv("REWRITE_MAX_TOKENS", "8000"))  # ~2000 words

# ── Search settings ────────────────────────────────────────────────────────
SEARCH_NUM_RESULTS = 10  # Custom Search API caps num at 10
MAX_COMPETITORS = 2
REQUIRED_REFERENCES = 2
BROWSER_HEADLESS = os.getenv("BROWSER_HEADLESS", "true").lower() != "false"

# ── Scraping settings ──────────────────────────────────────────────────────
SCRAPE_TIMEOUT = 30  # seconds
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    """Everything one pipeline run needs, passed explicitly into the orchestrator."""

    content_api_url: str = CONTENT_API_URL
    anthropic_api_key: str = ANTHROPIC_API_KEY
    google_api_key: str = GOOGLE_API_KEY
    google_search_engine_id: str = GOOGLE_SEARCH_ENGINE_ID
    rewrite_models: tuple = field(default_factory=lambda: tuple(REWRITE_MODELS))
    rewrite_temperature: float = REWRITE_TEMPERATURE
    rewrite_max_tokens: int = REWRITE_MAX_TOKENS
    search_num_results: int = SEARCH_NUM_RESULTS
    max_competitors: int = MAX_COMPETITORS
    required_references: int = REQUIRED_REFERENCES
    scrape_timeout: int = SCRAPE_TIMEOUT
    store_timeout: int = STORE_TIMEOUT
    browser_headless: bool = BROWSER_HEADLESS
    output_dir: Path = ARTICLE_OUTPUT_DIR
