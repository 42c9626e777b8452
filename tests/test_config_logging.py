"""Tests for loguru logging setup."""

import logging
from pathlib import Path

import pytest
from loguru import logger

from json_to_ts.config.logging import (
    LOG_FILE_NAME,
    FileLogOptions,
    InterceptHandler,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_installs_intercept_handler(self) -> None:
        setup_logging("INFO")
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, InterceptHandler) for h in handlers)

    def test_file_sink(self, tmp_path: Path) -> None:
        setup_logging("DEBUG", tmp_path)
        assert (tmp_path / LOG_FILE_NAME).exists()

    def test_custom_file_name(self, tmp_path: Path) -> None:
        setup_logging("DEBUG", tmp_path, file_options=FileLogOptions(file_name="x.log"))
        assert (tmp_path / "x.log").exists()

    def test_no_file_sink_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        setup_logging("DEBUG")
        logging.getLogger("json_to_ts.sample").info("stderr only")
        assert list(tmp_path.iterdir()) == []


class TestInterceptHandler:
    """Tests for stdlib -> loguru forwarding."""

    def test_forwards_records(self) -> None:
        setup_logging("DEBUG")
        messages: list[str] = []
        logger.add(messages.append, format="{extra[name]}|{level}|{message}")

        logging.getLogger("json_to_ts.sample").warning("hello %s", "intercept")

        assert any(
            "json_to_ts.sample|WARNING|hello intercept" in m for m in messages
        )

    def test_custom_level_number(self) -> None:
        setup_logging("DEBUG")
        messages: list[str] = []
        logger.add(messages.append, format="{message}", level=0)

        record = logging.LogRecord("x", 25, __file__, 1, "custom level", None, None)
        record.levelname = "NOT_A_LOGURU_LEVEL"
        InterceptHandler().emit(record)

        assert any("custom level" in m for m in messages)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_bound_name(self) -> None:
        messages: list[str] = []
        logger.remove()
        logger.add(messages.append, format="{extra[name]}:{message}")

        get_logger("json_to_ts.cli").info("bound")

        assert messages == ["json_to_ts.cli:bound\n"]
