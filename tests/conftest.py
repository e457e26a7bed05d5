"""Shared fixtures: throwaway GOPATH trees under tmp_path."""

from pathlib import Path

import pytest

from gopath_vendor.context import Context


def _make_package(path: Path, *files: str) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    for name in files or ("pkg.go",):
        (path / name).write_text("package x\n")
    return path


@pytest.fixture
def make_package():
    """Create a package folder holding the given files (default: one .go file)."""
    return _make_package


@pytest.fixture
def roots(tmp_path: Path) -> dict[str, Path]:
    """
    Create two workspace roots and a GOROOT.

    Creates:
    - ws1/src/
    - ws2/src/
    - goroot/src/
    """
    paths = {
        "ws1": tmp_path / "ws1" / "src",
        "ws2": tmp_path / "ws2" / "src",
        "goroot": tmp_path / "goroot" / "src",
    }
    for path in paths.values():
        path.mkdir(parents=True)
    return paths


@pytest.fixture
def ctx(roots: dict[str, Path]) -> Context:
    return Context(gopath_list=(roots["ws1"], roots["ws2"]), goroot=roots["goroot"])
