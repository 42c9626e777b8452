"""Logging configuration using loguru.

생성 결과는 stdout으로 나가므로 콘솔 로그는 stderr에만 쓴다.
LOG_DIR이 설정된 경우에만 파일 로깅을 추가한다.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from json_to_ts.config.settings import get_settings


if TYPE_CHECKING:
    from loguru import Logger


log = logger.bind(name=__name__)


# loguru 포맷 (공백 최소화)
LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green>|"
    "<level>{level:5}</level>|"
    "<cyan>{extra[name]}</cyan>|"
    "<level>{message}</level>"
)

LOG_FORMAT_FILE = "{time:YYYY-MM-DD HH:mm:ss.SSS}|{level:5}|{extra[name]}|{message}"

LOG_FILE_NAME = "json-to-ts.log"


@dataclass
class FileLogOptions:
    rotation: str = "10 MB"
    retention: str = "7 days"
    json_logs: bool = False
    file_name: str = LOG_FILE_NAME


class InterceptHandler(logging.Handler):
    """표준 logging을 loguru로 리다이렉트하는 핸들러.

    라이브러리 모듈은 logging.getLogger(__name__)만 쓰고,
    출력 형식과 대상은 여기서 일괄 결정한다.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # loguru level 매핑
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    log_level: str | None = None,
    log_dir: Path | str | None = None,
    *,
    file_options: FileLogOptions | None = None,
) -> None:
    """로깅 설정 초기화.

    Args:
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_dir: 로그 디렉토리 경로 (None이면 설정값, 설정값도 비면 파일 로깅 생략)
        file_options: 파일 로깅 옵션 (회전/보관/JSON/파일명)
    """
    settings = get_settings()
    options = file_options or FileLogOptions(
        rotation=settings.logging.rotation,
        retention=settings.logging.retention,
        json_logs=settings.logging.json_logs,
    )
    # 로그 레벨 정규화 (loguru는 대문자 필요)
    effective_level = (log_level or settings.logging.level).upper()

    # 기존 핸들러 제거
    logger.remove()

    # 기본 extra 값 설정 (root 표기 방지)
    logger.configure(extra={"name": "json-to-ts"})

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=effective_level,
        colorize=None,
    )

    target_dir = log_dir or settings.logging.log_dir
    if target_dir:
        log_path = Path(target_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / options.file_name,
            format=LOG_FORMAT_FILE,
            level=effective_level,
            rotation=options.rotation,
            retention=options.retention,
            serialize=options.json_logs,
        )

    # 표준 logging 라이브러리 인터셉트
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    log.debug(
        "Logging initialized: level={}, file_dir={}",
        effective_level,
        target_dir or "<disabled>",
    )


def get_logger(name: str) -> "Logger":
    """모듈별 로거 반환.

    Args:
        name: 모듈 이름 (보통 __name__)

    Returns:
        loguru logger with bound name
    """
    return logger.bind(name=name)
