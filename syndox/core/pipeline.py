"""Sequential pipeline that threads one context through every stage."""

from __future__ import annotations

import inspect
import logging
import os
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from syndox.config import SyndoxConfig
from syndox.core.exceptions import PipelineError, SyndoxError
from syndox.core.identity import create_files_hash
from syndox.core.loaders import load_asts, load_contents
from syndox.core.models import FileHash, RunStats
from syndox.core.resolver import resolve
from syndox.core.storage import DocumentStore, get_default_db_path

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Everything one run needs, created once and handed to each stage."""

    store: DocumentStore
    config: SyndoxConfig
    patterns: list[str]
    cwd: str = field(default_factory=os.getcwd)
    paths: list[str] = field(default_factory=list)
    files: FileHash = field(default_factory=dict)
    stats: RunStats = field(default_factory=RunStats)


StageResult = RunContext | None
Stage = Callable[[RunContext], StageResult | Awaitable[StageResult]]


@dataclass
class PipelineResult:
    """Outcome of a pipeline run.

    ``context`` is the last context a stage produced; it is None when a stage
    voided it or when the first stage failed.
    """

    context: RunContext | None
    error: SyndoxError | None = None
    failed_stage: str | None = None
    completed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class Pipeline:
    """Runs stages strictly one after another.

    Each stage receives the previous stage's context and may be a coroutine
    function; the next stage starts only after it finishes. Returning None
    ends the run early without error. The first exception stops the run.
    """

    def __init__(self, stages: Sequence[Stage]) -> None:
        self._stages = list(stages)

    @property
    def stage_names(self) -> list[str]:
        return [_stage_name(stage) for stage in self._stages]

    async def run(self, context: RunContext) -> PipelineResult:
        result = PipelineResult(context=context)
        current: RunContext | None = context

        for stage in self._stages:
            name = _stage_name(stage)
            logger.debug("stage %s started", name)
            started = time.perf_counter()
            try:
                outcome: Any = stage(current)  # type: ignore[arg-type]
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except SyndoxError as e:
                return self._fail(result, current, name, e)
            except Exception as e:
                wrapped = PipelineError(f"Stage {name} failed: {e!r}")
                wrapped.__cause__ = e
                return self._fail(result, current, name, wrapped)

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("stage %s finished in %.1f ms", name, elapsed_ms)
            if current is not None:
                current.stats.durations[name] = elapsed_ms
            result.completed.append(name)

            current = outcome
            result.context = current
            if current is None:
                logger.debug("context voided after %s", name)
                break

        return result

    def _fail(
        self,
        result: PipelineResult,
        context: RunContext | None,
        name: str,
        error: SyndoxError,
    ) -> PipelineResult:
        logger.error("stage %s failed: %s", name, error)
        result.context = context
        result.error = error
        result.failed_stage = name
        return result


def _stage_name(stage: Stage) -> str:
    return getattr(stage, "__name__", type(stage).__name__)


def initialize_store(context: RunContext) -> RunContext:
    """Load the document and cache the current configuration in it."""
    context.store.load()
    context.store.merge("config", context.config.values)
    return context


async def resolve_patterns(context: RunContext) -> RunContext:
    """Expand glob patterns into a deduplicated path list."""
    context.paths = await resolve(context.patterns, root_dir=context.cwd)
    context.stats.patterns = len(context.patterns)
    context.stats.tracked = len(context.paths)
    return context


def assign_identities(context: RunContext) -> RunContext:
    """Create fresh FileHashItems for the resolved paths."""
    context.files = create_files_hash(context.paths, cwd=context.cwd)
    return context


def commit_files(context: RunContext) -> RunContext:
    """Write the new items into the ``files`` namespace."""
    context.store.files.merge(context.files)
    return context


async def load_file_contents(context: RunContext) -> RunContext:
    """Read every tracked file into its ``data`` field."""
    loaded = await load_contents(context.store)
    context.stats.loaded = loaded
    context.stats.skipped = len(context.store.load()["files"]) - loaded
    return context


async def load_file_asts(context: RunContext) -> None:
    """Parse every loaded file, then void the context."""
    context.stats.parsed = await load_asts(context.store)
    return None


def default_stages() -> list[Stage]:
    """The standard run, in order."""
    return [
        initialize_store,
        resolve_patterns,
        assign_identities,
        commit_files,
        load_file_contents,
        load_file_asts,
    ]


async def run_pipeline(
    patterns: Sequence[str],
    config: SyndoxConfig,
    cwd: str | None = None,
    stages: Sequence[Stage] | None = None,
) -> tuple[PipelineResult, RunContext]:
    """Build a context for ``patterns`` and run the stages over it.

    Returns the result and the original context, which still carries the
    run statistics after the last stage voids it.
    """
    store = DocumentStore(get_default_db_path(config.out_dir))
    context = RunContext(
        store=store,
        config=config,
        patterns=list(patterns),
        cwd=cwd if cwd is not None else os.getcwd(),
    )
    pipeline = Pipeline(stages if stages is not None else default_stages())
    with store:
        result = await pipeline.run(context)
    return result, context
