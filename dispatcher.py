# dispatcher.py — validate a batch of URLs, fetch the valid ones on a bounded pool
"""
Concurrent crawl dispatcher.

Every candidate gets exactly one outcome:
  • Rejected – failed validation, never fetched, never took a worker slot
  • Success  – `fetch(url)` returned (its return value is kept as `result`)
  • Failure  – `fetch(url)` raised; the exception is kept as `error`

Outcomes are recorded only by the thread that called `dispatch()`, so the
optional `on_outcome` callback never runs concurrently with itself.
"""

from __future__ import annotations

import concurrent.futures
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Union

from logger import setup_logger
from validator import Violation, validate

# ─────────────────────────── tunables ────────────────────────────
MAX_CONCURRENT = 10
# ──────────────────────────────────────────────────────────────────

log = setup_logger("crawler.dispatcher")


class Success(NamedTuple):
    url: str
    index: int
    result: Any = None


class Failure(NamedTuple):
    url: str
    index: int
    error: BaseException


class Rejected(NamedTuple):
    url: str
    index: int
    violations: List[Violation]


Outcome = Union[Success, Failure, Rejected]
FetchFn = Callable[[str], Any]


def _run_fetch(fetch: FetchFn, url: str, index: int) -> Outcome:
    """Worker body: turn any fetch exception into a Failure."""
    try:
        return Success(url, index, fetch(url))
    except Exception as exc:
        return Failure(url, index, exc)


def dispatch(candidates: Iterable[str],
             fetch: FetchFn,
             max_concurrent: int = MAX_CONCURRENT,
             on_outcome: Optional[Callable[[Outcome], None]] = None) -> List[Outcome]:
    """
    Validate each candidate and fetch the valid ones, at most
    `max_concurrent` at a time. Returns once every candidate has an
    outcome; the list is in completion order (see `in_input_order`).
    """
    if max_concurrent < 1:
        raise ValueError(f"max_concurrent must be >= 1, got {max_concurrent}")

    candidates = list(candidates)
    outcomes: List[Outcome] = []
    if not candidates:
        return outcomes

    def _record(outcome: Outcome) -> None:
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    log.info(f"dispatching {len(candidates)} candidate(s), {max_concurrent} slot(s)")

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=max_concurrent, thread_name_prefix="fetch"
    ) as pool:
        futures = {}
        for index, url in enumerate(candidates):
            violations = validate(url)
            if violations:
                log.info(f"rejected {url}: " + "; ".join(v.message for v in violations))
                _record(Rejected(url, index, violations))
                continue
            futures[pool.submit(_run_fetch, fetch, url, index)] = url

        for fut in concurrent.futures.as_completed(futures):
            outcome = fut.result()
            if isinstance(outcome, Failure):
                log.warning(f"failed {outcome.url}: {outcome.error}")
            else:
                log.debug(f"finished {outcome.url}")
            _record(outcome)

    log.info(
        f"dispatch done: {count(outcomes, Success)} finished, "
        f"{count(outcomes, Failure)} failed, {count(outcomes, Rejected)} rejected"
    )
    return outcomes


def count(outcomes: Iterable[Outcome], kind: type) -> int:
    return sum(1 for o in outcomes if isinstance(o, kind))


def in_input_order(outcomes: Iterable[Outcome]) -> List[Outcome]:
    return sorted(outcomes, key=lambda o: o.index)
