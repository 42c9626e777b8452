"""Tests for the exception hierarchy."""

from pathlib import Path

from json_to_ts.exceptions import (
    ErrorCode,
    ErrorContext,
    InputError,
    InputFileNotFoundError,
    InvalidInputError,
    JsonToTsError,
    MissingInputError,
    OutputError,
)


class TestJsonToTsError:
    """Tests for the base exception."""

    def test_defaults(self) -> None:
        error = JsonToTsError("boom")
        assert str(error) == "boom"
        assert error.error_code == ErrorCode.INTERNAL_ERROR
        assert error.exit_code == 1
        assert error.context == ErrorContext()

    def test_to_dict(self) -> None:
        error = JsonToTsError(
            "boom", context=ErrorContext(source="a.json", details={"k": 1})
        )
        assert error.to_dict() == {
            "error_code": "INTERNAL_ERROR",
            "error_type": "JsonToTsError",
            "message": "boom",
            "source": "a.json",
            "details": {"k": 1},
        }


class TestInputErrors:
    """Tests for input error subclasses."""

    def test_invalid_input(self) -> None:
        error = InvalidInputError("unexpected end of data")
        assert isinstance(error, InputError)
        assert error.error_code == ErrorCode.INVALID_INPUT
        assert error.message == "Invalid JSON: unexpected end of data"
        assert error.reason == "unexpected end of data"

    def test_missing_input(self) -> None:
        error = MissingInputError()
        assert isinstance(error, InputError)
        assert error.error_code == ErrorCode.MISSING_INPUT
        assert "No input provided" in error.message

    def test_file_not_found_lists_candidates(self) -> None:
        error = InputFileNotFoundError("data.jsn", "/work", ["a.json", "b.json"])
        assert error.error_code == ErrorCode.FILE_NOT_FOUND
        assert error.path == Path("data.jsn")
        assert "File not found: data.jsn" in error.message
        assert "Current directory: /work" in error.message
        assert "  - a.json" in error.message
        assert "  - b.json" in error.message
        assert error.context.details == {
            "cwd": "/work",
            "candidates": ["a.json", "b.json"],
        }

    def test_file_not_found_no_candidates(self) -> None:
        error = InputFileNotFoundError("x.json", "/work")
        assert error.candidates == []
        assert "No candidate files" in error.message

    def test_context_preserved(self) -> None:
        ctx = ErrorContext(operation="convert")
        error = InvalidInputError("bad", context=ctx)
        assert error.context.operation == "convert"
        assert error.context.details == {"reason": "bad"}


class TestOutputError:
    """Tests for OutputError."""

    def test_message(self) -> None:
        error = OutputError("out/types.ts", "No such file or directory")
        assert error.error_code == ErrorCode.OUTPUT_ERROR
        assert error.context.source == "out/types.ts"
        assert "out/types.ts" in error.message
        assert not isinstance(error, InputError)
