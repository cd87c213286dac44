#parser.py
import re
from bs4 import BeautifulSoup

_WS_RE = re.compile(r"\s+")


def _clean(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def page_title(html: str) -> str | None:
    """Text of the first <title>, or None when absent/empty."""
    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return None
    return _clean(soup.title.get_text(" ")) or None


def table_cells(html: str) -> list[str]:
    """Text of every <td>/<th> in document order, blank cells dropped."""
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    cells = (_clean(c.get_text(" ")) for c in soup.find_all(["td", "th"]))
    return [c for c in cells if c]
