"""Decorators for conversion entry points."""

from __future__ import annotations

import functools
import logging
import time
from typing import TYPE_CHECKING, ParamSpec, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable


log = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _truncate(value: object, max_len: int = 100) -> str:
    """값을 로그용으로 축약"""
    s = str(value)
    return s[:max_len] + "..." if len(s) > max_len else s


def logged_call(func: Callable[P, R]) -> Callable[P, R]:
    """호출 인자, 결과, 소요 시간을 debug 레벨로 남기는 데코레이터"""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        name = func.__qualname__
        log.debug("[REQ] %s args=%s", name, _truncate(args))
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed = (time.perf_counter() - start) * 1000
            log.debug("[ERR] %s -> %s (%.1fms)", name, e, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        log.debug("[RES] %s -> %s (%.1fms)", name, _truncate(result), elapsed)
        return result

    return wrapper
