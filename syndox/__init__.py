"""
Syndox: incremental file-identity cache for Python sources.

Syndox expands glob patterns into a deduplicated file list and keeps, for each
matched file, an identity record with its raw content and parsed syntax tree
in a JSON document that survives between runs.

Usage:
    import asyncio

    from syndox.config import load_config
    from syndox.core.pipeline import run_pipeline

    config = load_config(Path("."))
    result = asyncio.run(run_pipeline(["src/**/*.py"], config))
"""

__version__ = "0.1.0"
