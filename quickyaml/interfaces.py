from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol


class DocumentSerializer(Protocol):
    """
    Converts a whole document to text and back.
    """

    def encode(self, doc: Mapping[str, Any]) -> str:
        ...

    def decode(self, raw: str) -> Any | None:
        """Return the parsed root (None for an empty document)."""
        ...


class KeyValueDocumentStore(Protocol):
    """
    A single YAML-like document persisted at a fixed path.
    """

    @property
    def path(self) -> Path:
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: Mapping[str, Any]) -> None:
        """Persist the full document, replacing what was there."""
        ...
