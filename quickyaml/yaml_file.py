from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """
    Read the whole file as UTF-8 text.

    Raises FileNotFoundError / OSError; callers decide how to report them.
    """
    return path.read_text(encoding="utf-8")


class _DocumentLoader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain strings."""


_DocumentLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)


def decode_yaml(raw: str) -> Any | None:
    """
    Parse YAML text with the safe loader.

    Returns None for empty or whitespace-only text. Malformed input raises yaml.YAMLError.
    """
    if not raw.strip():
        return None
    return yaml.load(raw, Loader=_DocumentLoader)


def encode_yaml(payload: Mapping[str, Any], *, sort_keys: bool = False) -> str:
    return yaml.safe_dump(
        dict(payload),
        sort_keys=sort_keys,
        allow_unicode=True,
        default_flow_style=False,
    )


def truncate(path: Path) -> None:
    with path.open("w", encoding="utf-8"):
        pass


def write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(text)


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.

    Symlinks are followed so the link itself survives, and the target's permission bits
    are carried over. The temp file is removed if anything fails before the replace.
    """
    target = path.resolve()
    tmp_path = target.with_suffix(target.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if target.exists():
            shutil.copymode(target, tmp_path)
        tmp_path.replace(target)
    except BaseException:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("YAML WRITE: failed to remove temp file %s: %r", tmp_path, e)
        raise
