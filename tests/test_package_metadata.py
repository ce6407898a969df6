"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexcoords


def _load_pyproject() -> dict:
    path = Path(__file__).resolve().parent.parent / "pyproject.toml"
    with path.open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    project = pyproject["project"]

    assert project["name"] == "hexcoords"
    assert project["version"] == hexcoords.__version__

    dependencies = " ".join(project["dependencies"])
    for dependency in ("numpy", "pydantic"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"


def test_public_names_resolve() -> None:
    for name in hexcoords.__all__:
        assert hasattr(hexcoords, name), name
