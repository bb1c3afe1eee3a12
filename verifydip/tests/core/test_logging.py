import json
import logging

import pytest

from verifydip.core.config import Settings
from verifydip.core.logging import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_records_are_json_with_service_fields(capsys, restore_logging):
    configure_logging(Settings(_env_file=None, environment="test", log_level="DEBUG"))

    logging.getLogger("verifydip.storage").debug("store ready", extra={"backend": "memory"})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "store ready"
    assert record["level"] == "DEBUG"
    assert record["logger"] == "verifydip.storage"
    assert record["service"] == "VerifydIP"
    assert record["environment"] == "test"
    assert record["backend"] == "memory"


def test_library_logger_levels(restore_logging):
    configure_logging(Settings(_env_file=None, log_level="DEBUG"))
    assert logging.getLogger("verifydip").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("multipart").level == logging.WARNING

    configure_logging(Settings(_env_file=None, log_level="INFO", log_sql=True))
    assert logging.getLogger("verifydip").level == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
