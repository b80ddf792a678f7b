"""Glob pattern resolution."""

from __future__ import annotations

import asyncio
import glob
import logging
from collections.abc import Iterable, Sequence

from syndox.core.exceptions import PatternResolutionError

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str, root_dir: str | None = None) -> list[str]:
    """Expand one glob pattern to its sorted matches.

    Relative patterns are matched against ``root_dir`` (the process working
    directory when omitted) and their matches stay relative to it.

    Raises:
        PatternResolutionError: If the pattern is empty or the filesystem fails
    """
    if not pattern:
        raise PatternResolutionError("Empty glob pattern")
    try:
        matches = glob.glob(pattern, root_dir=root_dir, recursive=True)
    except (OSError, ValueError) as e:
        raise PatternResolutionError(f"Cannot expand '{pattern}': {e}") from e
    return sorted(matches)


def flatten(nested: Iterable[Iterable[str]]) -> list[str]:
    """Concatenate a sequence of sequences one level deep."""
    return [path for group in nested for path in group]


def dedupe(paths: Iterable[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each path."""
    result: list[str] = []
    for path in paths:
        if path not in result:
            result.append(path)
    return result


async def resolve(patterns: Sequence[str], root_dir: str | None = None) -> list[str]:
    """Expand every pattern concurrently, then flatten and dedupe.

    The first failing pattern aborts the whole call; no partial result is
    returned.
    """
    groups = await asyncio.gather(
        *(asyncio.to_thread(expand_pattern, pattern, root_dir) for pattern in patterns)
    )
    for pattern, matches in zip(patterns, groups):
        if not matches:
            logger.warning("no matches for %s", pattern)
    return dedupe(flatten(groups))
