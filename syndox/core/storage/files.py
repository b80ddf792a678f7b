"""File hash storage operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from syndox.core.models import FileHash, file_hash_from_dict, file_hash_to_dict

if TYPE_CHECKING:
    from syndox.core.storage.document import DocumentStore

FILES_NAMESPACE = "files"


class FileHashStorage:
    """Typed view over the ``files`` namespace of a document."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def get_all(self) -> FileHash:
        """Read the whole FileHash. Items are detached copies."""
        return file_hash_from_dict(self._store.get_namespace(FILES_NAMESPACE))

    def merge(self, file_hash: FileHash) -> None:
        """Write items back keyed by index and flush.

        Entries not present in ``file_hash`` are left untouched.
        """
        self._store.merge(FILES_NAMESPACE, file_hash_to_dict(file_hash))

    def full_paths(self) -> list[str]:
        """Get the full path of every tracked item."""
        files = self._store.load().get(FILES_NAMESPACE, {})
        return [item["fullPath"] for item in files.values()]
