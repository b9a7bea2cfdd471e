"""
Persistent storage for ordered collections.

Each collection lives under a slash-separated key (for example
"menus/MAIN") and is stored as one JSON array document.
"""

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Sequence

import orjson

from ..errors import StoreUnavailable, StoreWriteFailed

KEY_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+$")


class CollectionStore(ABC):
    """Load and atomically replace ordered collections by key."""

    @abstractmethod
    def load(self, key: str) -> List[Any]:
        """Return the stored entries, or an empty list if there are none."""

    @abstractmethod
    def replace(self, key: str, entries: Sequence[Any]) -> None:
        """Store the full sequence, replacing what was there."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a collection. Returns False if there was nothing stored."""

    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        """Return stored keys starting with `prefix`, sorted."""


class JsonCollectionStore(CollectionStore):
    """Collection store writing one orjson document per key under a root directory."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug(f"JsonCollectionStore initialized at {self.root}")

    def _path_for(self, key: str) -> Path:
        segments = key.split("/")
        if not all(KEY_SEGMENT.match(segment) for segment in segments):
            raise StoreUnavailable(key, "invalid collection key")
        return self.root.joinpath(*segments).with_suffix(".json")

    def load(self, key: str) -> List[Any]:
        path = self._path_for(key)
        if not path.exists():
            return []
        try:
            with path.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error(f"Error reading collection {path}: {e}")
            raise StoreUnavailable(key, str(e)) from e

        if not isinstance(data, list):
            raise StoreUnavailable(key, f"expected a list, found {type(data).__name__}")
        return data

    def replace(self, key: str, entries: Sequence[Any]) -> None:
        path = self._path_for(key)
        try:
            payload = orjson.dumps(list(entries), option=orjson.OPT_INDENT_2)
        except TypeError as e:
            raise StoreWriteFailed(key, f"entries are not serializable: {e}") from e

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            # Readers see either the old document or the new one
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            self.logger.error(f"Error writing collection {path}: {e}")
            raise StoreWriteFailed(key, str(e)) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self.logger.debug(f"Wrote {len(entries)} entries to {path}")

    def delete(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.error(f"Error deleting collection {path}: {e}")
            raise StoreWriteFailed(key, str(e)) from e
        self.logger.info(f"Deleted collection {path}")
        return True

    def keys(self, prefix: str = "") -> List[str]:
        if not self.root.exists():
            return []
        found = []
        for path in self.root.rglob("*.json"):
            key = path.relative_to(self.root).with_suffix("").as_posix()
            if key.startswith(prefix):
                found.append(key)
        return sorted(found)
