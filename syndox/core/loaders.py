"""Content and syntax-tree loading over the whole ``files`` namespace."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from collections.abc import Callable, Iterable
from typing import Any

from syndox.config import get_config_value
from syndox.core.exceptions import FileSystemError
from syndox.core.storage import DocumentStore
from syndox.languages import ParseOptions, PythonParser, SourceParser

logger = logging.getLogger(__name__)

Entry = tuple[str, Any]


def safely_read_file(full_path: str) -> Entry | None:
    """Read a regular file as text; anything else yields None.

    Raises:
        FileSystemError: If the path cannot be stat'ed or read
    """
    try:
        mode = os.stat(full_path).st_mode
    except OSError as e:
        raise FileSystemError(f"Cannot stat {full_path}: {e}") from e

    if not stat.S_ISREG(mode):
        logger.warning("skip %s", full_path)
        return None

    logger.debug("read %s", full_path)
    try:
        with open(full_path, encoding="utf-8", newline="") as handle:
            return full_path, handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"Cannot read {full_path}: {e}") from e


async def read_files(full_paths: Iterable[str]) -> dict[str, str]:
    """Read every path concurrently and key the texts by path.

    The first failure propagates; results of sibling reads are dropped.
    """
    entries = await asyncio.gather(
        *(asyncio.to_thread(safely_read_file, path) for path in full_paths)
    )
    return dict(entry for entry in entries if entry is not None)


async def load_contents(store: DocumentStore) -> int:
    """Fill ``data`` of every tracked item from disk and persist the map.

    Items whose path is not a regular file get ``data`` unset but stay in
    the map. Returns the number of files read.
    """
    file_hash = store.files.get_all()
    contents = await read_files(store.files.full_paths())

    for item in file_hash.values():
        item.data = contents.get(item.full_path)

    store.files.merge(file_hash)
    return len(contents)


def get_parser(store: DocumentStore) -> PythonParser:
    """Build a parser from ``parse.options`` in the store's config namespace."""
    options = get_config_value(store.get_namespace("config"), "parse.options")
    return PythonParser(ParseOptions.from_mapping(options))


async def load_asts(store: DocumentStore, parser: SourceParser | None = None) -> int:
    """Parse the ``data`` of every tracked item into ``ast`` and persist the map.

    A single parse failure aborts the batch and nothing is written. Items
    without content get ``ast`` unset. Returns the number of trees built.
    """
    if parser is None:
        parser = get_parser(store)

    file_hash = store.files.get_all()
    sources = {
        item.full_path: item.data for item in file_hash.values() if item.data is not None
    }
    trees = await _map_concurrently(sources, parser.parse)

    for item in file_hash.values():
        item.ast = trees.get(item.full_path)

    store.files.merge(file_hash)
    return len(trees)


async def _map_concurrently(
    sources: dict[str, str], transform: Callable[[str, str], dict[str, Any]]
) -> dict[str, dict[str, Any]]:
    async def run(full_path: str, source: str) -> Entry:
        logger.debug("parse %s", full_path)
        return full_path, await asyncio.to_thread(transform, source, full_path)

    entries = await asyncio.gather(*(run(path, source) for path, source in sources.items()))
    return dict(entries)
