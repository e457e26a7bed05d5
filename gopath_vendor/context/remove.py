"""Vendored package removal.

``remove_package`` deletes the files of one package folder, then prunes the
folder and any parents left empty. Nested package folders are kept; they are
separate packages.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .pathos import clean_path
from .walker import LOOP_LIMIT
from .walker import walk_up

logger = logging.getLogger(__name__)


class PruneStatus(str, Enum):
    """Why empty-folder pruning stopped."""

    PRUNED = "pruned"  # walked all the way to the filesystem root
    STOPPED_NON_EMPTY = "stopped_non_empty"
    STOPPED_ERROR = "stopped_error"


@dataclass
class PruneOutcome:
    """Result of ``prune_empty_dirs``."""

    status: PruneStatus
    removed: int
    stopped_at: Path
    error: OSError | None = None


def has_go_file_in_folder(folder: str | Path) -> bool:
    """Check whether ``folder`` directly contains a ``.go`` file.

    A missing folder has no Go files. Other I/O errors propagate.
    """
    try:
        with os.scandir(folder) as entries:
            return any(not entry.is_dir(follow_symlinks=False) and entry.name.endswith(".go") for entry in entries)
    except FileNotFoundError:
        return False


def _is_empty(folder: Path) -> bool:
    with os.scandir(folder) as entries:
        return next(entries, None) is None


def prune_empty_dirs(path: str | Path, limit: int = LOOP_LIMIT) -> PruneOutcome:
    """Remove ``path`` and each parent while they are empty.

    Never raises OSError; failures end the walk with STOPPED_ERROR.
    """
    removed = 0
    folder = clean_path(path)
    for folder in walk_up(path, limit):
        try:
            if not _is_empty(folder):
                return PruneOutcome(PruneStatus.STOPPED_NON_EMPTY, removed, folder)
            os.rmdir(folder)
        except OSError as e:
            logger.debug(f"[remove] stopped pruning at {folder}: {e}", extra={"stopped_at": str(folder)})
            return PruneOutcome(PruneStatus.STOPPED_ERROR, removed, folder, e)
        removed += 1
    return PruneOutcome(PruneStatus.PRUNED, removed, folder)


def remove_package(path: str | Path) -> PruneOutcome:
    """Delete every non-directory entry in ``path``, then prune empty folders.

    Errors while deleting files propagate and may leave the folder partly
    cleaned. Errors while pruning are logged and never raised.

    Returns:
        The pruning outcome, for callers that want to report it
    """
    path = clean_path(path)
    with os.scandir(path) as it:
        entries = list(it)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            continue
        os.remove(entry.path)

    outcome = prune_empty_dirs(path)
    logger.debug(
        f"[remove] {path}: {outcome.status.value}, {outcome.removed} folders removed",
        extra={
            "package_dir": str(path),
            "prune_status": outcome.status.value,
            "folders_removed": outcome.removed,
            "stopped_at": str(outcome.stopped_at),
        },
    )
    return outcome
