from __future__ import annotations

from .disk_store import DiskYamlDocumentStore, YamlSerializer
from .errors import (
    FileMissingError,
    InvalidExtensionError,
    ModelViolationError,
    NotFoundError,
    ParseError,
    QuickYAMLError,
    TypeMismatchError,
    WriteError,
)
from .model import DefaultModelValue, ModelOptions, ModelVariable, StoreOptions, VariableEntry
from .store import QuickYAML
from .values import ValueType, YAMLValue

__all__ = [
    "QuickYAML",
    "StoreOptions",
    "ModelOptions",
    "ModelVariable",
    "DefaultModelValue",
    "VariableEntry",
    "ValueType",
    "YAMLValue",
    "DiskYamlDocumentStore",
    "YamlSerializer",
    "QuickYAMLError",
    "NotFoundError",
    "FileMissingError",
    "InvalidExtensionError",
    "ParseError",
    "WriteError",
    "TypeMismatchError",
    "ModelViolationError",
]
