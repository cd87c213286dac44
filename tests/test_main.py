import logging

import pytest
from click.testing import CliRunner

import crawler
import fetcher
import main


def _fake_scraper(**_):
    def scrape(url):
        if "down" in url:
            raise fetcher.FetchError(url, 1, ConnectionError("refused"))
        return crawler.PageReport(url, "Hello", ["a", "b"])
    return scrape


def test_crawl_renders_every_outcome(monkeypatch):
    monkeypatch.setattr(crawler, "make_scraper", _fake_scraper)
    result = CliRunner().invoke(
        main.cli, ["crawl", "--cells", "http://example.com/a", "https://EXAMPLE.com/B_c"])

    assert result.exit_code == 1
    assert "Finished http://example.com/a" in result.output
    assert "  title: Hello" in result.output
    assert "  cell: a" in result.output
    assert "url: https://EXAMPLE.com/B_c" in result.output
    assert "(Code: 199)" in result.output
    assert "1 finished, 0 failed, 1 rejected" in result.output


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_crawl_reads_urls_from_stdin(monkeypatch):
    monkeypatch.setattr(crawler, "make_scraper", _fake_scraper)
    result = CliRunner().invoke(
        main.cli, ["crawl", "-w", "2"], input="http://example.com/x  http://example.com/y\n")

    assert result.exit_code == 0
    assert "2 finished, 0 failed, 0 rejected" in result.output
    assert "cell:" not in result.output


def test_crawl_reports_fetch_failures(monkeypatch):
    monkeypatch.setattr(crawler, "make_scraper", _fake_scraper)
    result = CliRunner().invoke(main.cli, ["crawl", "http://example.com/down"])

    assert result.exit_code == 1
    assert "Something went wrong, http://example.com/down:" in result.output
    assert "refused" in result.output
    line = next(l for l in result.output.splitlines() if l.startswith("Something went wrong"))
    assert line.count("http://example.com/down") == 1


def test_empty_input_asks_for_urls():
    result = CliRunner().invoke(main.cli, ["crawl"], input="\n")

    assert result.exit_code == 1
    assert "Please enter at least one valid URL." in result.output


def test_check_only_validates(monkeypatch):
    def explode(**_):
        raise AssertionError("check must not fetch")

    monkeypatch.setattr(crawler, "make_scraper", explode)
    result = CliRunner().invoke(main.cli, ["check", "http://example.com/ok", "ftp://example.com"])

    assert result.exit_code == 1
    assert "ok http://example.com/ok" in result.output
    assert "Error: HTTP Error (Code: 400)" in result.output


def test_check_all_valid_exits_cleanly():
    result = CliRunner().invoke(main.cli, ["check", "https://example.com/fine"])
    assert result.exit_code == 0


def test_crawl_log_file_and_verbose(monkeypatch, tmp_path):
    monkeypatch.setattr(crawler, "make_scraper", _fake_scraper)
    log_file = tmp_path / "crawl.log"
    result = CliRunner().invoke(
        main.cli, ["crawl", "-v", "--log-file", str(log_file), "http://example.com/a", "ftp://x"])

    assert result.exit_code == 1
    assert logging.getLogger("crawler").level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert " : INFO : dispatcher : dispatching 2 candidate(s), 10 slot(s)" in text
    assert " : INFO : dispatcher : rejected ftp://x: HTTP Error" in text
    assert " : DEBUG : dispatcher : finished http://example.com/a" in text
    assert "1 finished, 0 failed, 1 rejected" in text
