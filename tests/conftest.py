"""Pytest configuration and fixtures"""

import logging
import os
from collections.abc import Iterator

import pytest
from loguru import logger


# test 환경에서 .env / 셸 설정 영향 방지
for _key in (
    "JSON_TO_TS_ROOT_NAME",
    "JSON_TO_TS_USE_TYPES",
    "JSON_TO_TS_NO_EXPORT",
    "JSON_TO_TS_OPTIONAL",
    "JSON_TO_TS_INPUT_GLOB",
    "LOG_DIR",
):
    os.environ.pop(_key, None)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings per test and undo logging setup afterwards"""
    from json_to_ts.config.logging import InterceptHandler
    from json_to_ts.config.settings import reset_settings

    reset_settings()
    yield
    reset_settings()
    logger.remove()
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if not isinstance(h, InterceptHandler)]


@pytest.fixture
def sample_user() -> dict[str, object]:
    """Nested sample document"""
    return {
        "name": "João",
        "age": 30,
        "hobbies": ["reading", "programming"],
        "address": {"street": "Rua A", "number": 123},
    }
