"""Exit codes and error kinds for the envy CLI.

Every failure is fatal: the error is reported on stderr and the process
exits with the code attached to the error kind.
"""
from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Process exit codes."""
    SUCCESS = 0
    ERROR = 1
    USAGE = 2  # argparse
    CONFIG_NOT_FOUND = 3
    FILE_READ_ERROR = 4
    PARSE_ERROR = 5
    INTERRUPTED = 130  # Standard for Ctrl+C


@dataclass
class EnvyError(Exception):
    """Error with exit code and message."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ConfigNotFound(EnvyError):
    """The default config location could not be determined."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.CONFIG_NOT_FOUND, hint)


class FileReadError(EnvyError):
    """The config file is missing or unreadable."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.FILE_READ_ERROR, hint)


class ParseError(EnvyError):
    """The config file is not a usable YAML mapping."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.PARSE_ERROR, hint)


def report_error(message: str, hint: Optional[str] = None) -> None:
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(f"Hint: {hint}", file=sys.stderr)


def handle_error(error: BaseException, verbose: bool = False) -> int:
    """Report an error that escaped the pipeline and return its exit code.

    Anything that is not an EnvyError is reported as a generic failure, with
    its traceback when `verbose` is set.
    """
    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return int(ExitCode.INTERRUPTED)
    if not isinstance(error, EnvyError):
        if verbose:
            traceback.print_exception(type(error), error, error.__traceback__)
        error = EnvyError(str(error) or type(error).__name__)
    report_error(error.message, error.hint)
    return int(error.code)
