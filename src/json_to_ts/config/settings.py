"""Configuration settings for json-to-ts"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


log = logging.getLogger(__name__)

load_dotenv()  # 이미 설정된 환경 변수가 .env보다 우선

DEFAULT_ROOT_NAME = "RootObject"
DEFAULT_INPUT_GLOB = "*.json"
DEFAULT_LOG_LEVEL = "WARNING"

# loguru 기본 레벨
LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _get_bool(key: str, default: bool = False) -> bool:
    """Get bool from env, fall back to default on unknown values"""
    raw_value = os.getenv(key)
    if raw_value is None:
        return default
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    log.warning("Invalid bool env %s=%s, using default=%s", key, raw_value, default)
    return default


def _get_non_empty(key: str, default: str) -> str:
    """Get string from env, treat blank values as unset"""
    value = os.getenv(key, "").strip()
    return value or default


def _get_log_level(key: str, default: str = DEFAULT_LOG_LEVEL) -> str:
    """Get loguru level name from env, fall back to default on unknown names"""
    raw_value = os.getenv(key, "").strip()
    if not raw_value:
        return default
    normalized = raw_value.upper()
    if normalized in LOG_LEVELS:
        return normalized
    log.warning("Invalid log level env %s=%s, using default=%s", key, raw_value, default)
    return default


@dataclass(frozen=True)
class ConverterSettings:
    """Default converter options (CLI flags override these)"""

    root_name: str = field(
        default_factory=lambda: _get_non_empty("JSON_TO_TS_ROOT_NAME", DEFAULT_ROOT_NAME)
    )
    use_types: bool = field(
        default_factory=lambda: _get_bool("JSON_TO_TS_USE_TYPES", False)
    )
    no_export: bool = field(
        default_factory=lambda: _get_bool("JSON_TO_TS_NO_EXPORT", False)
    )
    optional: bool = field(
        default_factory=lambda: _get_bool("JSON_TO_TS_OPTIONAL", False)
    )
    # 입력 파일을 못 찾았을 때 후보 목록에 쓰는 패턴
    input_glob: str = field(
        default_factory=lambda: _get_non_empty("JSON_TO_TS_INPUT_GLOB", DEFAULT_INPUT_GLOB)
    )


@dataclass(frozen=True)
class LoggingSettings:
    """Logging settings"""

    level: str = field(default_factory=lambda: _get_log_level("LOG_LEVEL"))
    # 비어 있으면 파일 로깅 안 함
    log_dir: str = field(default_factory=lambda: os.getenv("LOG_DIR", ""))
    rotation: str = field(default_factory=lambda: os.getenv("LOG_ROTATION", "10 MB"))
    retention: str = field(default_factory=lambda: os.getenv("LOG_RETENTION", "7 days"))
    json_logs: bool = field(default_factory=lambda: _get_bool("LOG_JSON", False))


@dataclass(frozen=True)
class Settings:
    """Main settings container"""

    converter: ConverterSettings = field(default_factory=ConverterSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings
    _settings = None
