"""
QuickYAML: a small key-value store kept as one YAML document on disk.

Every mutation loads the document, changes it and rewrites the whole file. With the
cache enabled, reads are served from an in-memory copy of the last written document;
with it disabled, every read decodes the file again.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar

from .disk_store import DiskYamlDocumentStore
from .errors import InvalidExtensionError, ModelViolationError, NotFoundError, TypeMismatchError
from .interfaces import DocumentSerializer
from .model import ModelOptions, StoreOptions, VariableEntry
from .settings import Settings, get_settings
from .values import Document, ValueType, clone, is_yaml_value, values_equal

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

R = TypeVar("R")


class QuickYAML:
    def __init__(
        self,
        path: str | os.PathLike[str],
        options: StoreOptions | Mapping[str, Any] | None = None,
        *,
        settings: Settings | None = None,
        serializer: DocumentSerializer | None = None,
    ):
        self._path = Path(path)
        if not self._path.is_file():
            raise NotFoundError(f"The file path {self._path} was not found", path=self._path)
        if self._path.suffix not in YAML_SUFFIXES:
            raise InvalidExtensionError(
                f"The file path {self._path} is not a YAML file (.yaml and .yml allowed only)",
                path=self._path,
            )

        if options is None:
            options = StoreOptions()
        elif not isinstance(options, StoreOptions):
            options = StoreOptions.model_validate(options)
        self._options = options

        self._settings = settings or get_settings()
        self._use_cache = options.cache if options.cache is not None else self._settings.cache_enabled
        self._document = DiskYamlDocumentStore(self._path, serializer=serializer, settings=self._settings)
        self._cache: Document | None = None

        doc = self._document.load()
        if self._use_cache:
            self._cache = clone(doc)

        if options.model is not None:
            self._seed_defaults(options.model, doc)

    def _seed_defaults(self, model: ModelOptions, doc: Document) -> None:
        pending = model.pending_defaults(doc)
        if not pending:
            return
        for default in pending:
            doc[default.variable] = clone(default.value)
        self.write(doc)
        logger.info(
            "YAML DEFAULTS: seeded %s into %s",
            [d.variable for d in pending],
            self._path,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def model(self) -> ModelOptions | None:
        return self._options.model

    @property
    def cache_enabled(self) -> bool:
        return self._use_cache

    # ------------------------------------------------------------------
    # Load / write primitives
    # ------------------------------------------------------------------

    def load(self) -> Document:
        """Read and decode the file, bypassing the cache."""
        return self._document.load()

    def write(self, document: Mapping[str, Any]) -> None:
        """
        Replace the whole file with `document`.

        An empty document leaves a zero-byte file. On success the cache (if any) mirrors
        exactly what was written.
        """
        for variable, value in document.items():
            if not isinstance(variable, str):
                raise TypeMismatchError(
                    f"Variable names must be strings, got {type(variable).__name__} {variable!r}",
                    path=self._path,
                )
            if not is_yaml_value(value):
                raise TypeMismatchError(
                    f"Value of type {type(value).__name__} for {variable!r} cannot be stored in YAML",
                    path=self._path,
                    variable=variable,
                )
        snapshot = clone(dict(document))
        self._document.save(snapshot)
        if self._use_cache:
            self._cache = snapshot

    def reload(self) -> "QuickYAML":
        """Re-read the file, picking up edits made outside this store."""
        doc = self._document.load()
        if self._use_cache:
            self._cache = clone(doc)
        return self

    def _view(self) -> Document:
        """
        The current document without copying. Never mutate it or hand it out; the cache is
        only ever replaced, never changed in place.
        """
        if self._cache is None:
            return self._document.load()
        # Reads must still fail once the file is gone.
        self._document.ensure_exists()
        return self._cache

    def _current(self) -> Document:
        """A private copy of the current document, safe to mutate."""
        if self._cache is None:
            return self._document.load()
        return clone(self._view())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set(self, variable: str, value: Any) -> "QuickYAML":
        """
        Add a variable, or overwrite its value if it already exists. Nested values are
        replaced, never merged.
        """
        if not is_yaml_value(value):
            raise TypeMismatchError(
                f"Value of type {type(value).__name__} for {variable!r} cannot be stored in YAML",
                path=self._path,
                variable=variable,
            )
        model = self._options.model
        if model is not None and model.enforce_on_write:
            problem = model.check(variable, value)
            if problem is not None:
                raise ModelViolationError(problem, path=self._path, variable=variable)

        doc = self._current()
        doc[variable] = value
        self.write(doc)
        return self

    def delete(self, variable: str) -> "QuickYAML":
        doc = self._current()
        if variable in doc:
            del doc[variable]
            self.write(doc)
        return self

    def purge(self, *variables: str) -> int:
        """
        Delete every given variable that exists, with a single write.

        Returns how many were deleted. Nothing is written when none of them existed.
        """
        doc = self._current()
        removed = 0
        for variable in variables:
            if variable in doc:
                del doc[variable]
                removed += 1
        if removed:
            self.write(doc)
        return removed

    def clear(self) -> "QuickYAML":
        self.write({})
        return self

    def push(self, variable: str, *values: Any) -> int:
        """
        Append values to a sequence variable.

        Returns the new length, or -1 (without writing) when the variable does not exist.
        """
        doc = self._current()
        if variable not in doc:
            return -1
        seq = self._sequence(doc, variable, "push")
        for value in values:
            if not is_yaml_value(value):
                raise TypeMismatchError(
                    f"Value of type {type(value).__name__} cannot be pushed to {variable!r}",
                    path=self._path,
                    variable=variable,
                )
        seq.extend(clone(list(values)))
        self.write(doc)
        return len(seq)

    def pull(self, variable: str, *values: Any) -> int:
        """
        Remove every element equal to any of `values` from a sequence variable.

        Always rewrites the file when the variable exists, even if nothing matched.
        Returns the new length, or -1 (without writing) when the variable does not exist.
        """
        doc = self._current()
        if variable not in doc:
            return -1
        seq = self._sequence(doc, variable, "pull")
        kept = [item for item in seq if not any(values_equal(item, v) for v in values)]
        doc[variable] = kept
        self.write(doc)
        return len(kept)

    def _sequence(self, doc: Document, variable: str, op: str) -> list[Any]:
        seq = doc[variable]
        if not isinstance(seq, list):
            raise TypeMismatchError(
                f"{op}() needs {variable!r} to be a sequence, got {type(seq).__name__}",
                path=self._path,
                variable=variable,
            )
        return seq

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, variable: str) -> Any | None:
        """Return the variable's value, or None when it does not exist."""
        return clone(self._view().get(variable))

    def has(self, variable: str) -> bool:
        return variable in self._view()

    def __contains__(self, variable: object) -> bool:
        return isinstance(variable, str) and self.has(variable)

    def ensure(self, variable: str, default: Any) -> Any:
        """Like get(), with `default` for a missing variable. The default is not stored."""
        doc = self._view()
        return clone(doc[variable]) if variable in doc else default

    def find(self, variable: str) -> VariableEntry:
        doc = self._view()
        if variable in doc:
            return VariableEntry(variable=variable, value=clone(doc[variable]))
        return VariableEntry(variable=variable, value=None, exists=False)

    def pick(self, *variables: str) -> list[VariableEntry]:
        """Entries for the given variables, in argument order; missing ones are skipped."""
        doc = self._view()
        return [VariableEntry(variable=v, value=clone(doc[v])) for v in variables if v in doc]

    @property
    def size(self) -> int:
        return len(self._view())

    def __len__(self) -> int:
        return self.size

    def to_dict(self) -> Document:
        return self._current()

    def entries(self) -> list[tuple[str, Any]]:
        return list(self._current().items())

    def keys(self) -> list[str]:
        return list(self._view())

    def values(self) -> list[Any]:
        return list(self._current().values())

    def first(self) -> Any | None:
        doc = self._view()
        return clone(next(iter(doc.values()))) if doc else None

    def last(self) -> Any | None:
        doc = self._view()
        return clone(next(reversed(doc.values()))) if doc else None

    def index_of(self, variable: str) -> int:
        for index, key in enumerate(self._view()):
            if key == variable:
                return index
        return -1

    def for_each(self, func: Callable[[Any, str, int], Any]) -> "QuickYAML":
        """Call func(value, variable, index) for each entry of one snapshot of the document."""
        for index, (variable, value) in enumerate(self._current().items()):
            func(value, variable, index)
        return self

    def map(self, func: Callable[[Any, str, int], R]) -> list[R]:
        snapshot = self._current()
        return [func(value, variable, index) for index, (variable, value) in enumerate(snapshot.items())]

    def declared_type(self, variable: str) -> ValueType | None:
        model = self._options.model
        return model.declared_type(variable) if model is not None else None

    def __repr__(self) -> str:
        return f"QuickYAML(path={str(self._path)!r}, cache={self._use_cache})"
