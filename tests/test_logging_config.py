"""Tests for the application logging setup."""

import logging

import pytest

from utils.constants import APP_NAME
from utils.logging_config import LOG_FILE_NAME, get_logger, resolve_level, setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.parametrize(
    "name, expected",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR),
     ("LOUD", logging.INFO), ("", logging.INFO), (None, logging.INFO)],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_setup_writes_file_and_keeps_console_quiet(app_logger, tmp_path, capsys):
    setup_logging(level=logging.DEBUG, log_dir=tmp_path)
    setup_logging(level=logging.DEBUG, log_dir=tmp_path)
    assert len(app_logger.handlers) == 2

    log = get_logger("tests")
    log.info("imported 3 entries")
    log.warning("cannot link form")
    for handler in app_logger.handlers:
        handler.flush()

    err = capsys.readouterr().err
    assert "cannot link form" in err
    assert "imported 3 entries" not in err

    text = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "heblex.tests | imported 3 entries" in text
