# crawler.py  — default fetch collaborator: one page, no link following

from __future__ import annotations

from functools import partial
from typing import Callable, List, NamedTuple, Optional

import fetcher, parser
from logger import setup_logger

log = setup_logger("crawler.scrape")


class PageReport(NamedTuple):
    url: str
    title: Optional[str]
    cells: List[str]


def scrape_page(url: str,
                timeout: float = fetcher.REQUEST_TIMEOUT,
                retries: int = fetcher.RETRIES) -> PageReport:
    """
    Fetch `url` and pull out its title and table cell text.
    Raises fetcher.FetchError when the page cannot be retrieved.
    """
    html = fetcher.fetch_page(url, timeout=timeout, retries=retries)
    log.debug(f"visited {url}")

    title = parser.page_title(html)
    if title:
        log.debug(f"title found on {url}: {title}")
    cells = parser.table_cells(html)
    for cell in cells:
        log.debug(f"table cell on {url}: {cell}")
    return PageReport(url, title, cells)


def make_scraper(timeout: float = fetcher.REQUEST_TIMEOUT,
                 retries: int = fetcher.RETRIES) -> Callable[[str], PageReport]:
    """One-argument fetch operation suitable for dispatcher.dispatch()."""
    return partial(scrape_page, timeout=timeout, retries=retries)
