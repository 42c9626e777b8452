"""Custom exception hierarchy for json-to-ts.

Exception 계층 구조:
- JsonToTsError (base)
  - InputError: 입력 관련
    - InvalidInputError: JSON 파싱 실패
    - MissingInputError: 입력 없음
    - InputFileNotFoundError: 입력 파일 없음
  - OutputError: 결과 파일 저장 실패
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCode(str, Enum):
    """표준화된 에러 코드."""

    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Input
    INPUT_ERROR = "INPUT_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_INPUT = "MISSING_INPUT"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # Output
    OUTPUT_ERROR = "OUTPUT_ERROR"


@dataclass
class ErrorContext:
    """에러 컨텍스트 정보."""

    source: str | None = None
    operation: str | None = None
    details: dict[str, Any] | None = None


class JsonToTsError(Exception):
    """Base exception for json-to-ts.

    모든 커스텀 예외의 부모 클래스.
    CLI 종료 코드와 error code를 포함.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        exit_code: int = 1,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.exit_code = exit_code
        self.context = context or ErrorContext()

    def to_dict(self) -> dict[str, Any]:
        """에러 정보를 딕셔너리로 변환."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "source": self.context.source,
            "details": self.context.details,
        }


# =============================================================================
# Input Errors
# =============================================================================


class InputError(JsonToTsError):
    """입력 관련 에러."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INPUT_ERROR,
        exit_code: int = 1,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, error_code, exit_code, context)


class InvalidInputError(InputError):
    """JSON 텍스트 파싱 실패.

    파서가 보고한 원인 메시지를 그대로 보존한다.
    """

    def __init__(
        self,
        reason: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx.details = {"reason": reason}
        self.reason = reason
        super().__init__(
            f"Invalid JSON: {reason}",
            ErrorCode.INVALID_INPUT,
            1,
            ctx,
        )


class MissingInputError(InputError):
    """파일, JSON 문자열 모두 주어지지 않음."""

    def __init__(
        self,
        message: str = "No input provided: pass a JSON file path or a JSON string "
        "(run with no arguments for usage)",
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.MISSING_INPUT, 1, context)


class InputFileNotFoundError(InputError):
    """입력 파일 경로가 존재하지 않음."""

    def __init__(
        self,
        path: str | Path,
        cwd: str | Path,
        candidates: list[str] | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx.source = str(path)
        ctx.details = {"cwd": str(cwd), "candidates": list(candidates or [])}
        self.path = Path(path)
        self.cwd = Path(cwd)
        self.candidates = list(candidates or [])

        lines = [f"File not found: {path}", f"Current directory: {cwd}"]
        if self.candidates:
            lines.append("Available files:")
            lines.extend(f"  - {name}" for name in self.candidates)
        else:
            lines.append("No candidate files found in the current directory")
        super().__init__("\n".join(lines), ErrorCode.FILE_NOT_FOUND, 1, ctx)


# =============================================================================
# Output Errors
# =============================================================================


class OutputError(JsonToTsError):
    """생성 결과 저장 실패."""

    def __init__(
        self,
        path: str | Path,
        reason: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx.source = str(path)
        ctx.details = {"reason": reason}
        super().__init__(
            f"Failed to write output '{path}': {reason}",
            ErrorCode.OUTPUT_ERROR,
            1,
            ctx,
        )
