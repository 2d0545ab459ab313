"""Failures raised while injecting dependencies into term.html."""
from __future__ import annotations

from pathlib import Path


class InjectionError(Exception):
    """Base class for every injection failure; nothing has been written."""


class MissingDependencyError(InjectionError):
    """A required input file does not exist."""

    def __init__(self, path: Path, description: str):
        self.path = Path(path)
        self.description = description
        super().__init__(f"Unable to find the {description} ({self.path}).")


class MissingMarkerError(InjectionError):
    """A marker comment is absent from the current document."""

    def __init__(self, marker: str, after: int | None = None):
        self.marker = marker
        self.after = after
        where = f" after offset {after}" if after is not None else ""
        super().__init__(f"Marker '{marker}' not found in document{where}.")


class WriteFailureError(InjectionError):
    """The output document could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to write {self.path}: {reason}")


class ReadFailureError(InjectionError):
    """An input file exists but could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to read {self.path}: {reason}")
