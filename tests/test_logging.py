from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fod_dashboard.core import logging as fod_logging
from fod_dashboard.core.logging import configure_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    level = root.level
    yield root
    if fod_logging._handler is not None:
        root.removeHandler(fod_logging._handler)
    fod_logging._handler = None
    root.setLevel(level)


def test_repeated_calls_install_one_handler(root_logger: logging.Logger) -> None:
    configure_logging("INFO")
    configure_logging("debug")

    installed = [h for h in root_logger.handlers if h is fod_logging._handler]
    assert len(installed) == 1
    assert root_logger.level == logging.DEBUG


def test_handler_is_reinstalled_after_removal(root_logger: logging.Logger) -> None:
    configure_logging()
    first = fod_logging._handler
    assert first is not None
    root_logger.removeHandler(first)

    configure_logging()

    assert fod_logging._handler is not first
    assert fod_logging._handler in root_logger.handlers


def test_unknown_level_falls_back_to_info(root_logger: logging.Logger) -> None:
    configure_logging("chatty")

    assert root_logger.level == logging.INFO
