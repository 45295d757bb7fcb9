# cutlog/core/exceptions.py
# Custom exception hierarchy for cutlog (pure - no I/O operations)

from __future__ import annotations

from pathlib import Path
from typing import Any, List


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for cutlog
class CutlogError(Exception):
    pass


# * Validation failure w/ per-field warnings; recoverable ones let the caller continue
class ValidationError(CutlogError):
    def __init__(self, warnings: List[str], recoverable: bool = True):
        self.warnings = warnings
        self.recoverable = recoverable
        details = "; ".join(warnings) if warnings else "no details"
        message = f"Validation failed with {len(warnings)} problems: {details}"
        super().__init__(message)


# * Rejected state-machine transition (pause/resume/end, QA dispatch)
class InvalidTransition(CutlogError):
    def __init__(self, message: str, status: str, action: str):
        super().__init__(message)
        self.status = status
        self.action = action

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"status={self.status!r}, action={self.action!r})"
        )


# * New capture range collides w/ recorded ones & overwrite was not confirmed
class CaptureConflictError(CutlogError):
    def __init__(self, message: str, conflicts: List[tuple[int, int]]):
        super().__init__(message)
        self.conflicts = conflicts

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"conflicts={self.conflicts!r})"
        )


# * Configuration errors
class ConfigurationError(CutlogError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(CutlogError):
    pass


# * Job/capture document has the wrong shape
class RecordError(CutlogError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, field={self.field!r})"


# * Base error for file I/O operations
class FileOperationError(CutlogError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
