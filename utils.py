# utils.py — candidate splitting + console rendering of outcomes
from __future__ import annotations
from typing import List

from dispatcher import Failure, Outcome, Rejected, Success
from validator import Violation


# ─────────────────────── input handling ───────────────────────────
def split_candidates(text: str) -> List[str]:
    """Whitespace-separated URLs from one line (or several) of text."""
    return text.split()


# ─────────────────────── pretty-print results ─────────────────────
def format_violations(url: str, violations: List[Violation]) -> str:
    return f"url: {url}\n" + "\n".join(str(v) for v in violations)


def format_outcome(outcome: Outcome, show_cells: bool = False) -> str:
    """Human-friendly console view of one outcome."""
    if isinstance(outcome, Rejected):
        return format_violations(outcome.url, outcome.violations)
    if isinstance(outcome, Failure):
        return f"Something went wrong, {outcome.url}: {outcome.error}"

    lines = [f"Finished {outcome.url}"]
    report = outcome.result
    title = getattr(report, "title", None)
    if title:
        lines.append(f"  title: {title}")
    if show_cells:
        lines.extend(f"  cell: {c}" for c in getattr(report, "cells", None) or [])
    return "\n".join(lines)


def outcome_colour(outcome: Outcome) -> str | None:
    if isinstance(outcome, Success):
        return "green"
    if isinstance(outcome, Failure):
        return "red"
    return "yellow"
