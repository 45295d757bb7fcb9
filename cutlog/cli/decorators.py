# cutlog/cli/decorators.py
# CLI decorator turning cutlog errors into one-line Rich messages & exit code 1

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.exceptions import (
    CutlogError,
    ValidationError,
    InvalidTransition,
    CaptureConflictError,
    ConfigurationError,
    JSONParsingError,
    RecordError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling cutlog errors in CLI commands w/ Rich output
def handle_cutlog_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..cutlog_io.console import console

        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            if not e.recoverable:
                console.print(format_error_message("Validation Error", str(e)))
                raise SystemExit(1)
            for warning in e.warnings:
                console.print(f"[cutlog.warn]{warning}[/]")
            return None
        except InvalidTransition as e:
            console.print(format_error_message("Not Allowed", str(e)))
            raise SystemExit(1)
        except CaptureConflictError as e:
            console.print(format_error_message("Capture Conflict", str(e)))
            console.print("[dim]Re-run with --overwrite to replace the overlapping captures[/]")
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except RecordError as e:
            console.print(format_error_message("Record Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except CutlogError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
