import logging

from dictionary_index.utils.logger_utils import Log, configure_logging


def test_time_block_records_elapsed(caplog):
    with caplog.at_level(logging.INFO, logger="dictionary_index.metrics"):
        with Log.time_block("build bst") as t:
            sum(range(1000))
    assert t.elapsed_ms >= 0
    assert "build bst" in caplog.text


def test_configure_logging_replaces_handlers(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(logging.WARNING, log_file=str(log_path))
    log = configure_logging(logging.WARNING, log_file=str(log_path))
    assert len(log.handlers) == 2
    logging.getLogger("dictionary_index.test").info("hello file")
    for h in log.handlers:
        h.flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")
    configure_logging()
