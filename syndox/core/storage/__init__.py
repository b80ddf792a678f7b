"""
Storage layer: one JSON document persisted across runs.

Components:
    - DocumentStore: Loads, caches and flushes the document
    - FileHashStorage: Typed access to the ``files`` namespace

Document layout:
    config: the configuration mapping cached from the last run
    files: index -> {fullPath, index, id, data, ast}

The document is stored at <out>/db.json.
"""

from syndox.core.storage.document import DB_FILE_NAME, DocumentStore, get_default_db_path
from syndox.core.storage.files import FILES_NAMESPACE, FileHashStorage

__all__ = [
    "DB_FILE_NAME",
    "DocumentStore",
    "FILES_NAMESPACE",
    "FileHashStorage",
    "get_default_db_path",
]
