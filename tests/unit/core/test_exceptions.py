# tests/unit/core/test_exceptions.py
# Unit tests for exception hierarchy & error handling decorator

from unittest.mock import patch

import pytest

from cutlog.cli.decorators import handle_cutlog_error
from cutlog.core.exceptions import (
    CaptureConflictError,
    ConfigurationError,
    CutlogError,
    FileOperationError,
    FileReadError,
    FileWriteError,
    InvalidTransition,
    JSONParsingError,
    RecordError,
    SettingsValidationError,
    ValidationError,
    format_error_message,
)


class TestFormatErrorMessage:

    # * Test format_error_message produces correct Rich markup
    def test_format_error_message_basic(self):
        result = format_error_message("Test Error", "something went wrong")
        assert result == "[red]Test Error:[/] something went wrong"

    # * Test format_error_message handles empty message
    def test_format_error_message_empty(self):
        assert format_error_message("Error", "") == "[red]Error:[/] "


class TestExceptionHierarchy:

    # * Test all custom exceptions inherit from CutlogError
    def test_all_exceptions_inherit_from_cutlog_error(self):
        exceptions = [
            ValidationError(["warning"]),
            InvalidTransition("no", status="ended", action="pause"),
            CaptureConflictError("overlap", conflicts=[(1, 2)]),
            ConfigurationError("config error"),
            SettingsValidationError("invalid", setting_name="tick_interval", value=0),
            JSONParsingError("json error"),
            RecordError("bad record", field="qty"),
            FileOperationError("file error", path="/tmp/test.txt"),
            FileReadError("read error", path="/tmp/test.txt"),
            FileWriteError("write error", path="/tmp/test.txt"),
        ]
        for exc in exceptions:
            assert isinstance(exc, CutlogError)

    def test_validation_error_attributes(self):
        error = ValidationError(["first", "second"], recoverable=False)
        assert error.warnings == ["first", "second"]
        assert error.recoverable is False
        assert "2 problems" in str(error)

    def test_invalid_transition_repr(self):
        error = InvalidTransition("Timer is not paused", "running", "resume")
        assert repr(error) == "InvalidTransition('Timer is not paused', status='running', action='resume')"

    def test_file_error_path_is_path(self):
        from pathlib import Path

        assert FileReadError("x", path="/tmp/a.json").path == Path("/tmp/a.json")

    def test_settings_error_is_configuration_error(self):
        assert isinstance(SettingsValidationError("x", "timezone", "Mars/Base"), ConfigurationError)


class TestHandleCutlogErrorDecorator:

    def test_successful_function_execution(self):
        @handle_cutlog_error
        def add(x, y):
            return x + y

        assert add(2, 3) == 5

    @patch("cutlog.cutlog_io.console.console")
    # * Recoverable ValidationError prints its warnings & returns None
    def test_validation_error_recoverable(self, mock_console):
        @handle_cutlog_error
        def soft():
            raise ValidationError(["check rate"], recoverable=True)

        assert soft() is None
        assert "check rate" in mock_console.print.call_args[0][0]

    @pytest.mark.parametrize(
        "error, expected_error_type",
        [
            (ValidationError(["bad"], recoverable=False), "Validation Error"),
            (InvalidTransition("Timer has ended", "ended", "pause"), "Not Allowed"),
            (JSONParsingError("Invalid JSON"), "JSON Parsing Error"),
            (RecordError("job.json: bad"), "Record Error"),
            (ConfigurationError("bad config"), "Configuration Error"),
            (FileReadError("Cannot read", path="x.json"), "File Error"),
            (CutlogError("generic"), "Error"),
        ],
    )
    @patch("cutlog.cutlog_io.console.console")
    # * Every CutlogError exits w/ code 1 & one formatted line
    def test_errors_exit_with_code_1(self, mock_console, error, expected_error_type):
        @handle_cutlog_error
        def failing():
            raise error

        with pytest.raises(SystemExit) as exc_info:
            failing()

        assert exc_info.value.code == 1
        mock_console.print.assert_called_once()
        assert f"{expected_error_type}:" in mock_console.print.call_args[0][0]

    @patch("cutlog.cutlog_io.console.console")
    # * Capture conflicts also hint at --overwrite
    def test_capture_conflict_hint(self, mock_console):
        @handle_cutlog_error
        def failing():
            raise CaptureConflictError("Quantities 1-2 overlap", [(1, 2)])

        with pytest.raises(SystemExit):
            failing()

        assert mock_console.print.call_count == 2
        assert "--overwrite" in mock_console.print.call_args_list[1][0][0]

    # * Non-cutlog exceptions propagate untouched
    def test_unexpected_exception_propagates(self):
        @handle_cutlog_error
        def failing():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            failing()

    def test_decorator_preserves_function_metadata(self):
        @handle_cutlog_error
        def documented():
            """Docstring"""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring"
