"""Shared fixtures for SysOp Console tests."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest
from PySide6.QtCore import QCoreApplication

from sysop_console.editor.controller import EditorController
from sysop_console.editor.declarations import build_catalog
from sysop_console.editor.session import CollectionSpec
from sysop_console.errors import StoreWriteFailed
from sysop_console.settings import ConsoleSettings
from sysop_console.stores import CollectionStore, JsonCollectionStore


class MemoryStore(CollectionStore):
    """In-memory collection store that can be told to reject writes."""

    def __init__(self, data: Dict[str, List[Any]] = None):
        self.data: Dict[str, List[Any]] = {k: list(v) for k, v in (data or {}).items()}
        self.fail_writes = False
        self.writes: List[str] = []

    def load(self, key: str) -> List[Any]:
        return list(self.data.get(key, []))

    def replace(self, key: str, entries: Sequence[Any]) -> None:
        if self.fail_writes:
            raise StoreWriteFailed(key, "disk full")
        self.writes.append(key)
        self.data[key] = list(entries)

    def delete(self, key: str) -> bool:
        if self.fail_writes:
            raise StoreWriteFailed(key, "disk full")
        return self.data.pop(key, None) is not None

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self.data if k.startswith(prefix))


def letters_spec(key: str = "letters", seed=None, required: bool = False) -> CollectionSpec:
    """Collection of plain strings, handy for reorder scenarios."""
    return CollectionSpec(
        key=key,
        label="Letters",
        decode=str,
        encode=str,
        describe=str,
        new_entry=lambda: "X",
        seed=seed,
        required=required,
        entry_type=str,
    )


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """Qt core application shared by all tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    return app


@pytest.fixture
def settings(tmp_path: Path, qapp: QCoreApplication) -> ConsoleSettings:
    """Settings backed by a throwaway INI file."""
    return ConsoleSettings("test", tmp_path / "console.ini")


@pytest.fixture
def store(tmp_path: Path) -> JsonCollectionStore:
    return JsonCollectionStore(tmp_path / "collections")


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore({"letters": ["A", "B", "C"]})


@pytest.fixture
def catalog(settings: ConsoleSettings):
    return build_catalog(settings)


@pytest.fixture
def controller(catalog, store: JsonCollectionStore) -> EditorController:
    return EditorController(catalog, store)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
