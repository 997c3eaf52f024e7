"""Unit tests for logging setup."""

import json

import pytest
import structlog

from collection_service.config import Settings
from collection_service.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_lines_filtered_by_level(capsys) -> None:
    configure_logging(Settings(_env_file=None, log_format="json", log_level="INFO"))
    logger = get_logger("tests")

    logger.debug("hidden")
    logger.info("Collection created", collection_id="c-1")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "Collection created"
    assert record["level"] == "info"
    assert record["collection_id"] == "c-1"
    assert "timestamp" in record
