from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Reads
    cache_enabled: bool

    # Writes
    atomic_writes: bool
    sort_keys: bool

    # Debug
    debug_log_documents: bool


def get_settings() -> Settings:
    cache_enabled = _env_bool("QUICKYAML_CACHE", True)

    # Temp file + rename; turn off to overwrite the target in place.
    atomic_writes = _env_bool("QUICKYAML_ATOMIC_WRITES", True)
    sort_keys = _env_bool("QUICKYAML_SORT_KEYS", False)

    # NOTE: documents may hold secrets; keep off outside local debugging.
    debug_log_documents = _env_bool("QUICKYAML_DEBUG_LOG_DOCUMENTS", False)

    return Settings(
        cache_enabled=cache_enabled,
        atomic_writes=atomic_writes,
        sort_keys=sort_keys,
        debug_log_documents=debug_log_documents,
    )
