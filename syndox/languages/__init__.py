"""
Language parsers: turn source text into JSON-compatible syntax trees.

Components:
    - SourceParser: Protocol defining the parser interface
    - PythonParser: ast-based parser for Python source
    - ParseOptions: Dialect settings read from ``parse.options``

Each node becomes ``{"type": <node class>, <field>: <value>, ...}``; with
``locations`` enabled a ``loc`` entry carries start/end line and column.
"""

from syndox.languages.base import SourceParser
from syndox.languages.models import ParseOptions
from syndox.languages.python import PythonParser

__all__ = [
    "ParseOptions",
    "PythonParser",
    "SourceParser",
]
