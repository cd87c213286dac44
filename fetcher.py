#fetcher.py
from __future__ import annotations
import requests, random, time

from logger import setup_logger

# ─────────────────────────── tunables ────────────────────────────
REQUEST_TIMEOUT = 10
RETRIES         = 2
BACKOFF_SECONDS = 1.5
# ──────────────────────────────────────────────────────────────────

_UA_POOL = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.4 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64; rv:126.0) Gecko/20100101 Firefox/126.0",
]

log = setup_logger("crawler.fetch")


class FetchError(Exception):
    """Raised once every attempt to fetch `url` has failed."""

    def __init__(self, url: str, attempts: int, reason: Exception):
        super().__init__(f"{reason} (after {attempts} attempt(s))")
        self.url = url
        self.attempts = attempts
        self.reason = reason


def _ua() -> str:
    return random.choice(_UA_POOL)


def fetch_page(url: str, timeout: float = REQUEST_TIMEOUT, retries: int = RETRIES) -> str:
    """GET `url` and return its body, retrying network/HTTP errors."""
    last_exc: requests.RequestException | None = None
    for attempt in range(1, retries + 2):
        try:
            log.debug(f"FETCH {url}  (try {attempt})")
            r = requests.get(url, headers={"User-Agent": _ua()}, timeout=timeout)
            r.raise_for_status()
            return r.text
        except requests.RequestException as exc:
            last_exc = exc
            log.warning(f"{url} ↳ error: {exc}")
            if attempt <= retries:
                time.sleep(BACKOFF_SECONDS * attempt)
    raise FetchError(url, retries + 1, last_exc) from last_exc
