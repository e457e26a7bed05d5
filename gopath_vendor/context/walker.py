"""Bounded upward directory walks.

Vendor lookup, manifest discovery and empty-folder pruning all walk from a
folder toward the filesystem root. They share ``walk_up`` so the iteration
cap and root detection live in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterator
from pathlib import Path

from .errors import LoopLimitExceeded
from .errors import MissingManifestError
from .pathos import clean_path

logger = logging.getLogger(__name__)

LOOP_LIMIT = 10000


def walk_up(start: str | Path, limit: int = LOOP_LIMIT) -> Iterator[Path]:
    """Yield ``start`` and each ancestor, ending with the filesystem root.

    Raises:
        LoopLimitExceeded: more than ``limit`` folders visited without
            reaching the root
    """
    folder = clean_path(start)
    for _ in range(limit + 1):
        yield folder
        parent = folder.parent
        # Root reached
        if parent == folder:
            return
        folder = parent
    raise LoopLimitExceeded(start, limit)


def find_ancestor(
    start: str | Path,
    predicate: Callable[[Path], bool],
    limit: int = LOOP_LIMIT,
) -> Path | None:
    """Return the nearest folder (``start`` included) matching ``predicate``."""
    for folder in walk_up(start, limit):
        if predicate(folder):
            return folder
    return None


def find_root(folder: str | Path, marker: str, limit: int = LOOP_LIMIT) -> Path:
    """Find the nearest folder at or above ``folder`` that contains ``marker``.

    Args:
        folder: Folder to start from
        marker: Path relative to each candidate folder (e.g. "vendor.json")
        limit: Iteration cap for the walk

    Returns:
        The first folder where ``folder/marker`` exists

    Raises:
        MissingManifestError: the filesystem root was reached without a match
    """
    root = find_ancestor(folder, lambda candidate: (candidate / marker).exists(), limit)
    if root is None:
        raise MissingManifestError(folder, marker)
    logger.debug(f"[root] {marker} found in {root}")
    return root
