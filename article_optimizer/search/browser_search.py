"""Fallback competitor search: render a Google results page in headless Chrome.

The browser is only started when the fallback runs, and `browser_session`
guarantees it is shut down on every exit path.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator
from urllib.parse import quote_plus, urljoin

from bs4 import BeautifulSoup

from article_optimizer.config import USER_AGENT
from article_optimizer.models import SearchResult

SEARCH_URL = "https://www.google.com/search?q={query}"
MAX_RESULT_BLOCKS = 10


def _launch_chrome(headless: bool = True):
    from selenium import webdriver
    from selenium.webdriver.chrome.service import Service
    from selenium.webdriver.chrome.options import Options

    try:
        from webdriver_manager.chrome import ChromeDriverManager
        service = Service(ChromeDriverManager().install())
    except Exception:
        # selenium resolves a driver itself (Selenium Manager)
        service = Service()

    options = Options()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-setuid-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=1920,1080")
    options.add_argument(f"--user-agent={USER_AGENT}")

    driver = webdriver.Chrome(service=service, options=options)
    driver.implicitly_wait(10)
    return driver


@contextmanager
def browser_session(headless: bool = True, launcher=_launch_chrome) -> Iterator:
    """Yield a WebDriver and always quit it, even when the body raises."""
    driver = launcher(headless)
    try:
        yield driver
    finally:
        try:
            driver.quit()
        except Exception as e:
            print(f"  WARNING: browser did not shut down cleanly: {e}")


def parse_search_results(html: str, limit: int = MAX_RESULT_BLOCKS) -> list[SearchResult]:
    """Extract (title, href, snippet) from the visible result blocks of a results page."""
    soup = BeautifulSoup(html, "html.parser")
    results: list[SearchResult] = []

    for block in soup.select("div.g")[:limit]:
        title_el = block.find("h3")
        link_el = block.find("a", href=True)
        if not title_el or not link_el:
            continue
        snippet_el = block.select_one(".VwiC3b")
        results.append(
            SearchResult(
                title=title_el.get_text(strip=True),
                url=urljoin("https://www.google.com", link_el["href"]),
                snippet=snippet_el.get_text(" ", strip=True) if snippet_el else "",
            )
        )

    return results


def search_with_browser(
    query: str,
    headless: bool = True,
    launcher=_launch_chrome,
) -> list[SearchResult]:
    """Render the public results page for `query` and parse up to 10 result blocks."""
    search_url = SEARCH_URL.format(query=quote_plus(query))

    with browser_session(headless=headless, launcher=launcher) as driver:
        driver.get(search_url)
        html = driver.page_source

    return parse_search_results(html)
