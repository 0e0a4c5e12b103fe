from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import quickyaml...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


ENV_VARS = (
    "QUICKYAML_CACHE",
    "QUICKYAML_ATOMIC_WRITES",
    "QUICKYAML_SORT_KEYS",
    "QUICKYAML_DEBUG_LOG_DOCUMENTS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """
    Run every test from an empty directory with no QUICKYAML_* overrides, so a developer's
    local.env or shell never leaks in.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def yaml_path(tmp_path: Path) -> Path:
    """An existing, empty ./example.yaml."""
    p = tmp_path / "example.yaml"
    p.write_text("", encoding="utf-8")
    return p


@pytest.fixture
def write_log(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    """
    Records every document handed to DiskYamlDocumentStore.save (one entry per file write).
    """
    from quickyaml.disk_store import DiskYamlDocumentStore

    calls: list[dict] = []
    original = DiskYamlDocumentStore.save

    def _save(self, doc):
        calls.append(dict(doc))
        return original(self, doc)

    monkeypatch.setattr(DiskYamlDocumentStore, "save", _save)
    return calls
