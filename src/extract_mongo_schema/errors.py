"""
Error types raised by the extraction pipeline.

Every error is terminal: the CLI reports the message and exits with
``exit_code``. Nothing in the pipeline retries or recovers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SchemaCliError(Exception):
    """Base exception for all pipeline failures."""

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MissingInput(SchemaCliError):
    """Raised when a required option was not supplied."""

    def __init__(self, message: str, option: str) -> None:
        self.option = option
        super().__init__(message, {"option": option})


class InvalidOutputTarget(SchemaCliError):
    """Raised when the output path points at a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'Error: output "{path}" is not a file.', {"path": str(path)})


class InvalidOption(SchemaCliError):
    """Raised when an optional value is outside its accepted range."""

    def __init__(self, message: str, option: str, value: Any = None) -> None:
        self.option = option
        self.value = value
        super().__init__(message, {"option": option, "value": value})


class ExtractionFailure(SchemaCliError):
    """Raised when the schema extractor cannot be loaded or fails."""


class TemplateReadFailure(SchemaCliError):
    """Raised when the HTML diagram template cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f'Error: cannot read template file "{path}". {reason}',
            {"path": str(path), "reason": reason},
        )


class WriteFailure(SchemaCliError):
    """Raised when the rendered output cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f'Error: cannot write output "{path}". {reason}',
            {"path": str(path), "reason": reason},
        )
