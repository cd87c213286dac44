# logger.py — shared log setup for the dispatcher, fetcher and CLI
import logging
import os
import sys
from datetime import datetime, timezone

ROOT_LOGGER = "crawler"


class CrawlFormatter(logging.Formatter):
    """
    One line per record:
    [ Mon Oct 19 04:43:00 AM UTC 2026 ] : INFO : dispatcher : Message
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")
        # child loggers show their last dotted segment
        context = getattr(record, "context", record.name.rsplit(".", 1)[-1])
        line = f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logger(name=ROOT_LOGGER, log_file=None, level=None):
    """
    Return logger `name`. Only the root 'crawler' logger owns handlers;
    children propagate to it. Calling again with a level or log file
    updates the existing setup.
    """
    if name != ROOT_LOGGER:
        setup_logger(ROOT_LOGGER, log_file=log_file, level=level)
        return logging.getLogger(name)

    logger = logging.getLogger(ROOT_LOGGER)
    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    formatter = CrawlFormatter()
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file and not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file)
        for h in logger.handlers
    ):
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
