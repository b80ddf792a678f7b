"""Shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from syndox.core.storage import DocumentStore, get_default_db_path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def store(temp_dir: Path) -> DocumentStore:
    """Create a document store inside the temp directory."""
    return DocumentStore(get_default_db_path(temp_dir / ".syndox"))


@pytest.fixture
def source_tree(temp_dir: Path) -> Path:
    """Create a small project: two modules and a package directory."""
    src = temp_dir / "src"
    src.mkdir()
    (src / "a.py").write_text("def a():\n    return 1\n")
    (src / "b.py").write_text("import a\n\nVALUE = a.a()\n")
    (src / "pkg.py").mkdir()
    return temp_dir
