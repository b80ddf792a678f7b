"""Data models for Syndox."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FileHashItem:
    """Identity, content and syntax tree of one tracked file."""

    id: str
    full_path: str
    index: str
    data: str | None = ""
    ast: dict[str, Any] | None = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON shape.

        Unset ``data``/``ast`` are left out of the mapping entirely.
        """
        payload: dict[str, Any] = {
            "fullPath": self.full_path,
            "index": self.index,
            "id": self.id,
        }
        if self.data is not None:
            payload["data"] = self.data
        if self.ast is not None:
            payload["ast"] = self.ast
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> FileHashItem:
        """Create a FileHashItem from a persisted mapping."""
        return cls(
            id=payload["id"],
            full_path=payload["fullPath"],
            index=payload["index"],
            data=payload.get("data"),
            ast=payload.get("ast"),
        )


FileHash = dict[str, FileHashItem]


def file_hash_to_dict(file_hash: FileHash) -> dict[str, dict[str, Any]]:
    """Serialize a whole FileHash for the ``files`` namespace."""
    return {index: item.to_dict() for index, item in file_hash.items()}


def file_hash_from_dict(payload: dict[str, Any]) -> FileHash:
    """Rebuild a FileHash from the ``files`` namespace."""
    return {index: FileHashItem.from_dict(value) for index, value in payload.items()}


class RunStats:
    """Statistics from a pipeline run."""

    def __init__(self) -> None:
        self.patterns: int = 0
        self.tracked: int = 0
        self.loaded: int = 0
        self.skipped: int = 0
        self.parsed: int = 0
        self.durations: dict[str, float] = {}

    def __repr__(self) -> str:
        return (
            f"RunStats(patterns={self.patterns}, tracked={self.tracked}, loaded={self.loaded}, "
            f"skipped={self.skipped}, parsed={self.parsed})"
        )
