"""Identity assignment for resolved paths."""

from __future__ import annotations

import os
import uuid
from collections.abc import Iterable

from syndox.core.models import FileHash, FileHashItem

_ID_LENGTH = 12


def generate_id() -> str:
    """Generate a short opaque identifier."""
    return uuid.uuid4().hex[:_ID_LENGTH]


def resolve_path_from_cwd(path: str, cwd: str | None = None) -> str:
    """Resolve a path against the working directory without following symlinks."""
    base = cwd if cwd is not None else os.getcwd()
    return os.path.normpath(os.path.join(base, path))


def create_file_hash_item(path: str, cwd: str | None = None) -> FileHashItem:
    """Create a fresh item for a glob-relative path."""
    return FileHashItem(
        id=generate_id(),
        full_path=resolve_path_from_cwd(path, cwd),
        index=path,
        data="",
        ast={},
    )


def create_files_hash(paths: Iterable[str], cwd: str | None = None) -> FileHash:
    """Build a brand-new FileHash keyed by path.

    Identifiers are generated on every call; earlier items for the same
    index are never consulted.
    """
    return {path: create_file_hash_item(path, cwd) for path in paths}
