from __future__ import annotations

from pathlib import Path


class QuickYAMLError(Exception):
    """Base class for every error raised by the store."""

    def __init__(self, message: str, *, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class NotFoundError(QuickYAMLError, FileNotFoundError):
    """The YAML file does not exist. The store never creates it."""


class FileMissingError(NotFoundError):
    """The YAML file was deleted after the store was constructed."""


class InvalidExtensionError(QuickYAMLError, ValueError):
    pass


class ParseError(QuickYAMLError, ValueError):
    pass


class WriteError(QuickYAMLError, OSError):
    pass


class TypeMismatchError(QuickYAMLError, TypeError):
    def __init__(self, message: str, *, path: Path | str | None = None, variable: str | None = None):
        super().__init__(message, path=path)
        self.variable = variable


class ModelViolationError(QuickYAMLError, ValueError):
    """A write rejected by a model declared with enforceOnWrite."""

    def __init__(self, message: str, *, path: Path | str | None = None, variable: str | None = None):
        super().__init__(message, path=path)
        self.variable = variable
