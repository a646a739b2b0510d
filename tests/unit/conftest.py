# tests/unit/conftest.py
"""
Fixtures for unit tests: small classes directories on tmp_path and a
scripted transformer.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from .helpers import ScriptedTransformer, write_file


@pytest.fixture
def classes_dir(tmp_path: Path) -> Path:
    """A classes directory holding org/foo/Bar.class and bar/Foo.txt."""
    root = tmp_path / "classes"
    write_file(root / "org" / "foo" / "Bar.class", b"\xca\xfe\xba\xbe-bar")
    write_file(root / "bar" / "Foo.txt", b"not a class")
    return root


@pytest.fixture
def mixed_classes_dir(tmp_path: Path) -> Path:
    """org/foo/Foo.class, org/foo/Bar.class and org/baz/Baz.class."""
    root = tmp_path / "classes"
    write_file(root / "org" / "foo" / "Foo.class", b"foo")
    write_file(root / "org" / "foo" / "Bar.class", b"bar")
    write_file(root / "org" / "baz" / "Baz.class", b"baz")
    return root


@pytest.fixture
def scripted_transformer() -> ScriptedTransformer:
    return ScriptedTransformer()
