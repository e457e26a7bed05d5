"""Host-aware path helpers and the built-in package classifier.

Import paths are slash separated; filesystem paths use the host separator.
On case-insensitive hosts (Windows, macOS) prefix checks ignore case.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

BUILTIN_PACKAGES = frozenset({"builtin", "unsafe", "C"})

_CASE_INSENSITIVE = sys.platform in ("win32", "darwin")


def is_builtin_package(import_path: str) -> bool:
    """Return True for pseudo-packages that live directly under GOROOT."""
    return import_path in BUILTIN_PACKAGES


def clean_path(path: str | Path) -> Path:
    """Absolute, lexically normalized path. Symlinks are not resolved."""
    return Path(os.path.abspath(os.fspath(path)))


def _fold(value: str) -> str:
    return value.casefold() if _CASE_INSENSITIVE else value


def file_has_prefix(path: str | Path, prefix: str | Path) -> bool:
    """Check whether ``prefix`` is ``path`` or one of its ancestor folders.

    The match must end on a separator boundary, so ``/ws1`` is not a prefix
    of ``/ws10/pkg``.
    """
    s = _fold(str(clean_path(path)))
    p = _fold(str(clean_path(prefix)))
    if s == p:
        return True
    if not p.endswith(os.sep):
        p += os.sep
    return s.startswith(p)


def file_trim_prefix(path: str | Path, prefix: str | Path) -> str:
    """Strip ``prefix`` from ``path`` when it is a prefix, else return ``path``."""
    s = str(clean_path(path))
    if not file_has_prefix(s, prefix):
        return str(path)
    return s[len(str(clean_path(prefix))) :]


def slash_to_import_path(path: str) -> str:
    """Convert a relative filesystem path to an import path."""
    return path.replace("\\", "/").strip("/")


def import_path_to_dir(root: str | Path, import_path: str) -> Path:
    """Join an import path onto a folder using the host separator."""
    return clean_path(Path(root).joinpath(*import_path.split("/")))
