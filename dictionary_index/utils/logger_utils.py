# logger_utils.py -  logging setup and timing helpers

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Directory used when a log file is requested without a directory part
LOG_DIR = "logs"

_ROOT = "dictionary_index"
_FILE_FMT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger.
    - console: RichHandler on stderr (or the given Console)
    - log_file: plain text, appended; bare file names land in LOG_DIR
    Calling it again replaces the handlers instead of stacking them.
    """
    log = logging.getLogger(_ROOT)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    log.setLevel(logging.DEBUG)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    rich_handler.setLevel(level)
    log.addHandler(rich_handler)

    if log_file:
        if not os.path.dirname(log_file):
            os.makedirs(LOG_DIR, exist_ok=True)
            log_file = os.path.join(LOG_DIR, log_file)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_FMT, "%Y-%m-%d %H:%M:%S"))
        log.addHandler(fh)
    return log


class Log:
    """Metric and timing helpers on top of the package logger."""

    logger = logging.getLogger(_ROOT + ".metrics")

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts).
        Example: build bst: 12.5ms
        """
        Log.logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure a block and log its duration in milliseconds.
        To use:
            with Log.time_block("build bst") as t:
                build()
            t.elapsed_ms
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed_ms = (time.perf_counter() - self.start) * 1000.0
        Log.metric(self.label, round(self.elapsed_ms, 4), "ms")
        return False
