import logging
from logging.handlers import RotatingFileHandler

from cargoshell.ui import ColorizingStreamHandler, PlainFormatter, init_logger, status, strip_ansi


def test_strip_ansi():
    assert strip_ansi("\x1b[31mred\x1b[0m plain") == "red plain"


def test_status_tags_line_up():
    lines = [strip_ansi(status(tag, "Load configuration")) for tag in ("ok", "failed", "warn")]
    assert lines == [
        "[  OK  ] Load configuration",
        "[FAILED] Load configuration",
        "[ WARN ] Load configuration",
    ]
    assert strip_ansi(status("error", "boom")) == "[error] boom"


def test_plain_formatter_strips_colors():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "\x1b[32mok\x1b[0m", None, None)
    assert PlainFormatter("%(message)s").format(record) == "ok"


def test_init_logger_is_idempotent(tmp_path):
    logfile = tmp_path / "logs" / "shell.log"
    logger = init_logger("cargoshell.test-idempotent", "INFO", logfile=logfile)
    again = init_logger("cargoshell.test-idempotent", "DEBUG", logfile=logfile)
    assert logger is again
    assert sum(isinstance(h, ColorizingStreamHandler) for h in logger.handlers) == 1
    assert sum(isinstance(h, RotatingFileHandler) for h in logger.handlers) == 1
    console = next(h for h in logger.handlers if isinstance(h, ColorizingStreamHandler))
    assert console.level == logging.DEBUG

    logger.debug("invocation logged")
    for handler in logger.handlers:
        handler.flush()
    assert "invocation logged" in logfile.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
