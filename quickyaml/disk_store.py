from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from .settings import Settings, get_settings
from .yaml_file import atomic_write_text, decode_yaml, encode_yaml, read_text, truncate, write_text

from .errors import FileMissingError, ParseError, WriteError
from .interfaces import DocumentSerializer, KeyValueDocumentStore

logger = logging.getLogger(__name__)


class YamlSerializer(DocumentSerializer):
    def __init__(self, *, sort_keys: bool = False) -> None:
        self._sort_keys = sort_keys

    def encode(self, doc: Mapping[str, Any]) -> str:
        return encode_yaml(doc, sort_keys=self._sort_keys)

    def decode(self, raw: str) -> Any | None:
        return decode_yaml(raw)


class DiskYamlDocumentStore(KeyValueDocumentStore):
    """
    Stores a single YAML document on disk at a fixed path.

    - The file must already exist; it is never created here.
    - Always returns a dict (empty dict for an empty file or a null document).
    - An empty dict is written as a zero-byte file, bypassing the serializer.
    """

    def __init__(
        self,
        path: Path,
        *,
        serializer: DocumentSerializer | None = None,
        settings: Settings | None = None,
    ):
        self._path = path
        self._settings = settings or get_settings()
        self._serializer = serializer or YamlSerializer(sort_keys=self._settings.sort_keys)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def ensure_exists(self) -> None:
        if not self.exists():
            raise FileMissingError(f"The file {self._path} was not found or was deleted", path=self._path)

    def load(self) -> dict[str, Any]:
        self.ensure_exists()
        try:
            raw = read_text(self._path)
        except FileNotFoundError as e:
            raise FileMissingError(f"The file {self._path} was deleted while reading", path=self._path) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"The YAML file {self._path} is not valid UTF-8: {e}", path=self._path) from e

        try:
            data = self._serializer.decode(raw)
        except yaml.YAMLError as e:
            raise ParseError(f"Unable to parse the YAML file {self._path}: {e}", path=self._path) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError(
                f"The YAML file {self._path} must hold a mapping at its root, got {type(data).__name__}",
                path=self._path,
            )
        doc: dict[str, Any] = {}
        for k, v in data.items():
            key = str(k)
            if key in doc:
                raise ParseError(f"The YAML file {self._path} has two keys that both read as {key!r}", path=self._path)
            doc[key] = v

        logger.debug("YAML LOAD: %s (%d keys)", self._path, len(doc))
        if self._settings.debug_log_documents:
            logger.debug("YAML LOAD: %s -> %r", self._path, doc)
        return doc

    def save(self, doc: Mapping[str, Any]) -> None:
        self.ensure_exists()
        try:
            if len(doc) == 0:
                truncate(self._path)
                logger.debug("YAML WRITE: %s truncated (empty document)", self._path)
                return

            text = self._serializer.encode(doc)
            if self._settings.atomic_writes:
                atomic_write_text(self._path, text)
            else:
                write_text(self._path, text)
        except (yaml.YAMLError, OSError, ValueError, TypeError) as e:
            raise WriteError(f"Unable to write the YAML file {self._path}: {e}", path=self._path) from e

        logger.debug("YAML WRITE: %s (%d keys, %d chars)", self._path, len(doc), len(text))
        if self._settings.debug_log_documents:
            logger.debug("YAML WRITE: %s <- %r", self._path, dict(doc))
