"""Protocol for source parsers."""

from __future__ import annotations

from typing import Any, Protocol


class SourceParser(Protocol):
    """Protocol for source parsers."""

    def parse(self, source: str, filename: str = "<unknown>") -> dict[str, Any]:
        """Parse source text into a JSON-compatible syntax tree."""
        ...
