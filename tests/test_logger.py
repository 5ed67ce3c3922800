"""Tests for diagnostic logging setup."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest
from py_app_dev.core.logging import logger

from path_helper.logger import setup_logger


@pytest.fixture
def restore_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.usefixtures("restore_logger")
def test_diagnostics_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger()

    logger.error("/etc/paths: No such file or directory")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "path_helper: /etc/paths: No such file or directory\n"


@pytest.mark.usefixtures("restore_logger")
def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger("warning")

    logger.debug("Reading segments from /etc/paths")

    assert capsys.readouterr().err == ""
