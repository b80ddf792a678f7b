"""JSON document store that holds every namespace."""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from syndox.core.exceptions import PersistenceError
from syndox.core.storage.files import FileHashStorage

DB_FILE_NAME = "db.json"

NAMESPACES = ("config", "files")


class DocumentStore:
    """Single on-disk JSON document with ``config`` and ``files`` namespaces.

    Every operation is whole-namespace: callers read a namespace, change it,
    and write it back. There is no locking; only one writer may hold a store
    for a given path at a time.
    """

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._document: dict[str, Any] | None = None

        self.files = FileHashStorage(self)

    @property
    def path(self) -> Path:
        return self._db_path

    def load(self) -> dict[str, Any]:
        """Read the document from disk once; later calls return the cached copy."""
        if self._document is None:
            self._document = self._read()
        return self._document

    def get_namespace(self, name: str) -> Any:
        """Return a copy of one namespace."""
        return copy.deepcopy(self.load().get(name, {}))

    def put_namespace(self, name: str, value: Any) -> None:
        """Replace one namespace in memory (no flush)."""
        self.load()[name] = copy.deepcopy(value)

    def merge(self, name: str, partial: dict[str, Any]) -> None:
        """Shallow-assign ``partial`` into a namespace, then flush the document."""
        document = self.load()
        current = document.get(name)
        if not isinstance(current, dict):
            current = {}
        current.update(copy.deepcopy(partial))
        document[name] = current
        self.flush()

    def flush(self) -> None:
        """Write the whole document to disk atomically."""
        document = self.load()
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._db_path.name}.", dir=self._db_path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(document, handle, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._db_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot write {self._db_path}: {e}") from e

    def get_stats(self) -> dict[str, int | str]:
        """Get document statistics."""
        files = self.load().get("files", {})
        return {
            "files": len(files),
            "loaded": sum(1 for item in files.values() if item.get("data") is not None),
            "parsed": sum(1 for item in files.values() if item.get("ast")),
            "path": str(self._db_path),
        }

    def close(self) -> None:
        """Drop the cached document."""
        self._document = None

    def __enter__(self) -> DocumentStore:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.close()

    def _read(self) -> dict[str, Any]:
        """Load the JSON document, applying namespace defaults."""
        document: dict[str, Any] = {}
        if self._db_path.exists():
            try:
                with self._db_path.open(encoding="utf-8") as handle:
                    document = json.load(handle)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise PersistenceError(f"Cannot read {self._db_path}: {e}") from e
            if not isinstance(document, dict):
                raise PersistenceError(f"{self._db_path} must contain a JSON object")

        for name in NAMESPACES:
            document.setdefault(name, {})
        return document


def get_default_db_path(out_dir: Path) -> Path:
    """Get the document path inside an output directory."""
    return out_dir / DB_FILE_NAME
