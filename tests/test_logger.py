import logging

import pytest

from config.settings import settings
from util import logger as log_setup


@pytest.fixture(autouse=True)
def _fresh():
    log_setup.shutdown_logger()
    yield
    log_setup.shutdown_logger()


def test_init_is_idempotent():
    first = log_setup.init_logger()
    count = len(logging.getLogger().handlers)

    second = log_setup.init_logger()

    assert first is second
    assert first.name == settings.LOGGER_NAME
    assert len(logging.getLogger().handlers) == count


def test_file_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_TO_FILE", True)
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path))

    log_setup.init_logger().warning("ai.tafsir.failed err=%s", "Timeout")
    log_setup.shutdown_logger()

    written = (tmp_path / settings.LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "WARNING kajian-tafsir - ai.tafsir.failed err=Timeout" in written
    assert "\033[" not in written


def test_color_formatter_leaves_record_plain():
    record = logging.makeLogRecord({"levelno": logging.ERROR, "levelname": "ERROR", "msg": "x"})

    line = log_setup.LevelColorFormatter("%(levelname)s %(message)s").format(record)

    assert line == "\033[31mERROR\033[0m x"
    assert record.levelname == "ERROR"
