import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import logging

from euclid import Angle, setup_logging


def _reset(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_duplicate_handlers():
    logger = setup_logging()
    try:
        setup_logging()
        assert logger.name == "euclid"
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        _reset(logger)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "euclid.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert len(logger.handlers) == 2
        Angle.normalise(-1.0)
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "euclid.angle - DEBUG - normalised -1.0" in text
    finally:
        _reset(logger)
