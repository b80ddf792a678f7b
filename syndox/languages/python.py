"""Python AST parser producing JSON-compatible trees."""

from __future__ import annotations

import ast
import math
from typing import Any

from syndox.core.exceptions import ParseError
from syndox.languages.models import ParseOptions


class PythonParser:
    """Parser for Python source text using the ast module."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    def parse(self, source: str, filename: str = "<unknown>") -> dict[str, Any]:
        """Parse Python source and convert the tree to plain dicts."""
        try:
            tree = ast.parse(
                source,
                filename=filename,
                type_comments=self.options.type_comments,
                feature_version=self.options.feature_version,
            )
        except SyntaxError as e:
            raise ParseError(f"Syntax error in {filename}: {e}") from e
        except ValueError as e:
            # source containing null bytes
            raise ParseError(f"Cannot parse {filename}: {e}") from e

        try:
            return _TreeSerializer(self.options.locations).visit(tree)
        except RecursionError as e:
            raise ParseError(f"Syntax tree of {filename} is too deeply nested") from e


class _TreeSerializer:
    """Walks an ast tree and returns nested dicts keyed by field name."""

    def __init__(self, locations: bool) -> None:
        self._locations = locations

    def visit(self, node: ast.AST) -> dict[str, Any]:
        result: dict[str, Any] = {"type": type(node).__name__}
        for name, value in ast.iter_fields(node):
            result[name] = self._convert(value)

        if self._locations and hasattr(node, "lineno"):
            result["loc"] = {
                "start": {"line": node.lineno, "column": node.col_offset},
                "end": {"line": node.end_lineno, "column": node.end_col_offset},
            }
        return result

    def _convert(self, value: Any) -> Any:
        if isinstance(value, ast.AST):
            return self.visit(value)
        if isinstance(value, list):
            return [self._convert(item) for item in value]
        return _constant(value)


def _constant(value: Any) -> Any:
    """Map a literal to a JSON value, falling back to its repr."""
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return repr(value)
