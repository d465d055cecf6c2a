from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger as loguru_logger

from publicerror.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
    setup_logging,
)


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    yield
    clear_correlation_id()
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)
    root.handlers[:] = root_handlers
    root.setLevel(root_level)


def test_correlation_id_lifecycle() -> None:
    assert get_correlation_id() == "-"
    set_correlation_id("abc")
    assert get_correlation_id() == "abc"
    set_correlation_id(None)
    assert get_correlation_id() == "-"
    set_correlation_id("abc")
    clear_correlation_id()
    assert get_correlation_id() == "-"


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_writes_file_with_correlation_id(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "app.log"
    setup_logging("info", log_file=log_file)

    set_correlation_id("req-42")
    logger.info("HTTP 400 - level 2: danger")
    logging.getLogger("thirdparty").warning("from stdlib {user_id}")
    logger.debug("below threshold")
    loguru_logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "req-42" in content
    assert "HTTP 400 - level 2: danger" in content
    stdlib_line = next(line for line in content.splitlines() if "from stdlib {user_id}" in line)
    assert ":test_setup_logging_writes_file_with_correlation_id:" in stdlib_line
    assert "req-42" in stdlib_line
    assert "below threshold" not in content
