# main.py — batch URL checker / crawler CLI
import logging
import sys

import click

import crawler, dispatcher, fetcher, utils
from logger import setup_logger
from validator import validate

MAX_URLS_HINT = 25      # advisory only, never enforced


def _read_candidates(urls: tuple[str, ...]) -> list[str]:
    if urls:
        return [u for arg in urls for u in utils.split_candidates(arg)]
    stream = sys.stdin
    if stream.isatty():
        click.echo(f"Enter website urls (separate by spaces and limit to {MAX_URLS_HINT}):")
    return utils.split_candidates(stream.readline())


def _require_candidates(urls: tuple[str, ...]) -> list[str]:
    candidates = _read_candidates(urls)
    if not candidates:
        click.echo(click.style("Please enter at least one valid URL.", fg="yellow"))
        sys.exit(1)
    if len(candidates) > MAX_URLS_HINT:
        click.echo(click.style(
            f"⚠️  {len(candidates)} URLs given; more than {MAX_URLS_HINT} may take a while.",
            fg="yellow"), err=True)
    return candidates


@click.group()
def cli() -> None:
    """Validate URLs for SEO-friendliness and scrape the valid ones."""
    pass


@cli.command()
@click.argument("urls", nargs=-1)
@click.option("-w", "--workers", default=dispatcher.MAX_CONCURRENT, show_default=True,
              type=click.IntRange(min=1), help="Max pages fetched at once.")
@click.option("--timeout", default=fetcher.REQUEST_TIMEOUT, show_default=True,
              type=float, help="Per-request timeout in seconds.")
@click.option("--retries", default=fetcher.RETRIES, show_default=True,
              type=click.IntRange(min=0), help="Extra attempts after a failed fetch.")
@click.option("--cells/--no-cells", default=False, help="Print table cell text.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also log to this file.")
def crawl(urls: tuple[str, ...], workers: int, timeout: float, retries: int,
          cells: bool, verbose: bool, log_file: str | None) -> None:
    """
    Check URLS (or one line of stdin) and scrape title + table cells
    from every valid page.
    """
    setup_logger(log_file=log_file, level=logging.DEBUG if verbose else logging.INFO)
    candidates = _require_candidates(urls)

    def _show(outcome: dispatcher.Outcome) -> None:
        click.echo(click.style(utils.format_outcome(outcome, show_cells=cells),
                               fg=utils.outcome_colour(outcome)))

    outcomes = dispatcher.dispatch(
        candidates,
        crawler.make_scraper(timeout=timeout, retries=retries),
        max_concurrent=workers,
        on_outcome=_show,
    )

    ok = dispatcher.count(outcomes, dispatcher.Success)
    failed = dispatcher.count(outcomes, dispatcher.Failure)
    rejected = dispatcher.count(outcomes, dispatcher.Rejected)
    click.echo(f"\n{ok} finished, {failed} failed, {rejected} rejected")
    if ok != len(outcomes):
        sys.exit(1)


@cli.command()
@click.argument("urls", nargs=-1)
def check(urls: tuple[str, ...]) -> None:
    """Validate URLS (or one line of stdin) without fetching anything."""
    bad = 0
    for url in _require_candidates(urls):
        violations = validate(url)
        if violations:
            bad += 1
            click.echo(click.style(utils.format_violations(url, violations), fg="yellow"))
        else:
            click.echo(click.style(f"ok {url}", fg="green"))
    if bad:
        sys.exit(1)


if __name__ == "__main__":
    cli()
