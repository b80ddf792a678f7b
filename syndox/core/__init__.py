"""
Core module: data models, exceptions, storage and the run pipeline.

Models (models.py):
    - FileHashItem: Identity, content and syntax tree of one tracked file
    - FileHash: Mapping from glob-relative path to FileHashItem
    - RunStats: Counters for one pipeline run

Exceptions (exceptions.py):
    - SyndoxError: Base exception for all syndox errors
    - PatternResolutionError, FileSystemError, ParseError,
      PersistenceError, ConfigError, PipelineError

Storage (storage/):
    - DocumentStore: JSON document with ``config`` and ``files`` namespaces
    - Stored in <out>/db.json

Pipeline stages live in resolver.py, identity.py and loaders.py and are
sequenced by pipeline.py.
"""

from syndox.core.exceptions import (
    ConfigError,
    FileSystemError,
    ParseError,
    PatternResolutionError,
    PersistenceError,
    PipelineError,
    SyndoxError,
)
from syndox.core.models import FileHash, FileHashItem, RunStats
from syndox.core.storage import DocumentStore, get_default_db_path

__all__ = [
    # Models
    "FileHash",
    "FileHashItem",
    "RunStats",
    # Exceptions
    "SyndoxError",
    "PatternResolutionError",
    "FileSystemError",
    "ParseError",
    "PersistenceError",
    "ConfigError",
    "PipelineError",
    # Storage
    "DocumentStore",
    "get_default_db_path",
]
