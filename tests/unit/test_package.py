"""Tests for the arithexpr package surface."""

from __future__ import annotations

import arithexpr


def test_version_is_string() -> None:
    assert isinstance(arithexpr.__version__, str)
    assert arithexpr.__version__


def test_public_names() -> None:
    for name in arithexpr.__all__:
        assert hasattr(arithexpr, name)
