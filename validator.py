# validator.py — URL structure + SEO-friendliness checks
"""
Structural and SEO-style checks for one raw URL string.
`validate()` never raises: an unparseable string is reported as a violation.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple
from urllib.parse import unquote, urlsplit

# ─────────────────────────── tunables ────────────────────────────
MAX_PATH_LENGTH  = 100
ALLOWED_SCHEMES  = ("http", "https")
# ──────────────────────────────────────────────────────────────────

PARSE_ERROR_CODE  = 500
SCHEME_ERROR_CODE = 400
POLICY_CODE       = 199

_KINDS = {PARSE_ERROR_CODE: "parse", SCHEME_ERROR_CODE: "scheme", POLICY_CODE: "policy"}

_CONTROL_RE   = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT_RE      = re.compile(r"[0-9]*")


class Violation(NamedTuple):
    """One reason a candidate is rejected (message + numeric code)."""
    message: str
    code: int

    @property
    def kind(self) -> str:
        return _KINDS.get(self.code, "unknown")

    def __str__(self) -> str:
        return f"Error: {self.message} (Code: {self.code})"


PARSE_ERROR  = Violation("There was a parsing error", PARSE_ERROR_CODE)
SCHEME_ERROR = Violation("HTTP Error", SCHEME_ERROR_CODE)
PATH_TOO_LONG = Violation(
    f"SEO-Friendliness violation: path length over {MAX_PATH_LENGTH}", POLICY_CODE
)
HAS_QUERY_OR_FRAGMENT = Violation(
    "SEO-Friendliness violation: path must not carry query or fragment", POLICY_CODE
)
BAD_PATH_CHARS = Violation(
    "SEO-Friendliness violation: path must be lowercase without underscores", POLICY_CODE
)


def _port_text(netloc: str) -> str:
    """Whatever follows the host's ':' separator ('' when there is none)."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host.partition("]")[2]
    return host.rpartition(":")[2] if ":" in host else ""


def _split(raw: str):
    """Return the SplitResult for `raw`, or None if it is not a parseable URL."""
    if _CONTROL_RE.search(raw) or raw.startswith(":"):
        return None
    try:
        parts = urlsplit(raw)
    except ValueError:          # e.g. unbalanced IPv6 brackets
        return None
    # the query is never unescaped, so a stray '%' there is fine
    if any(_BAD_ESCAPE_RE.search(p) for p in (parts.netloc, parts.path, parts.fragment)):
        return None
    # digits only; the range is not checked
    if not _PORT_RE.fullmatch(_port_text(parts.netloc)):
        return None
    return parts


def validate(raw: str) -> List[Violation]:
    """
    Return every violation for `raw`, in check order (empty list = valid).

    A parse failure is reported alone: scheme and path are unavailable.
    """
    parts = _split(raw)
    if parts is None:
        return [PARSE_ERROR]

    found: List[Violation] = []
    if parts.scheme not in ALLOWED_SCHEMES:
        found.append(SCHEME_ERROR)

    path = unquote(parts.path)
    if len(path) > MAX_PATH_LENGTH:
        found.append(PATH_TOO_LONG)
    if parts.query or parts.fragment:
        found.append(HAS_QUERY_OR_FRAGMENT)
    if path != path.lower() or "_" in path:
        found.append(BAD_PATH_CHARS)
    return found


def is_valid(raw: str) -> bool:
    return not validate(raw)
