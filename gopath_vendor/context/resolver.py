"""Import path resolution against a list of workspace roots.

Search order for ``find_import_dir`` (first match wins):
1. Built-in pseudo-packages resolve under GOROOT.
2. ``<ancestor>/vendor/<import path>`` for each ancestor of the importing
   directory, nearest first.
3. ``<root>/<import path>`` for each workspace root, in configured order.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from .errors import MissingManifestError
from .errors import NotInWorkspaceError
from .pathos import clean_path
from .pathos import file_has_prefix
from .pathos import file_trim_prefix
from .pathos import import_path_to_dir
from .pathos import is_builtin_package
from .pathos import slash_to_import_path
from .vendorfile import VENDOR_FILENAME
from .vendorfile import VendorFile
from .vendorfile import read_vendor_file
from .walker import find_root
from .walker import walk_up

logger = logging.getLogger(__name__)


def _is_dir(path: Path) -> bool:
    """Stat-based directory probe; only "absent" errors mean False."""
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return stat.S_ISDIR(st.st_mode)


@dataclass(frozen=True)
class Context:
    """Workspace configuration shared by every resolution call.

    Attributes:
        gopath_list: Workspace roots (``$GOPATH/src`` entries), fallback order
        goroot: Root holding the standard library (``$GOROOT/src``)
        vendor_file_reader: Parser used for vendor manifests
    """

    gopath_list: tuple[Path, ...]
    goroot: Path
    vendor_file_reader: Callable[[Path], VendorFile] = field(default=read_vendor_file, compare=False)

    def __post_init__(self) -> None:
        if not self.gopath_list:
            raise ValueError("at least one workspace root is required")
        for root in (*self.gopath_list, self.goroot):
            if not str(root) or not Path(root).is_absolute():
                raise ValueError(f"workspace root must be an absolute path: {root!r}")
        object.__setattr__(self, "gopath_list", tuple(clean_path(p) for p in self.gopath_list))
        object.__setattr__(self, "goroot", clean_path(self.goroot))

    def find_import_dir(self, relative: str | Path | None, import_path: str) -> tuple[Path, Path]:
        """Find the directory holding ``import_path``.

        Args:
            relative: Directory of the importing package; empty or None skips
                vendor folders
            import_path: Slash separated import path

        Returns:
            Tuple of (directory, workspace root)

        Raises:
            NotInWorkspaceError: nothing matched, or the nearest vendor match
                lies outside every workspace root
        """
        if is_builtin_package(import_path):
            return import_path_to_dir(self.goroot, import_path), self.goroot

        if relative:
            for folder in walk_up(relative):
                # Vendor folders at the filesystem root are not searched.
                if folder.parent == folder:
                    break
                look = import_path_to_dir(folder / "vendor", import_path)
                if not _is_dir(look):
                    continue
                for gopath in self.gopath_list:
                    if file_has_prefix(look, gopath):
                        logger.debug(
                            f"[resolve] {import_path} -> vendor {look}",
                            extra={"import_path": import_path, "directory": str(look), "layer": "vendor"},
                        )
                        return look, gopath
                # Nearest vendor copy is outside the workspace; no fallback.
                raise NotInWorkspaceError(import_path, relative)

        for gopath in self.gopath_list:
            candidate = import_path_to_dir(gopath, import_path)
            if _is_dir(candidate):
                logger.debug(
                    f"[resolve] {import_path} -> {candidate}",
                    extra={"import_path": import_path, "directory": str(candidate), "layer": "workspace"},
                )
                return candidate, gopath

        raise NotInWorkspaceError(import_path)

    def find_import_path(self, directory: str | Path) -> tuple[str, Path]:
        """Map an absolute directory back to (import path, workspace root)."""
        for gopath in self.gopath_list:
            if file_has_prefix(directory, gopath):
                import_path = slash_to_import_path(file_trim_prefix(directory, gopath))
                return import_path, gopath
        raise NotInWorkspaceError(directory)

    def find_canonical_path(self, import_path: str) -> str:
        """Return the upstream import path for ``import_path``.

        A package governed by a vendor manifest that lists it reports the
        manifest's canonical path. Packages with no manifest above them, or
        not listed in the one that governs them, are already canonical.
        """
        directory, _ = self.find_import_dir("", import_path)
        try:
            root = find_root(directory, VENDOR_FILENAME)
        except MissingManifestError:
            logger.debug(f"[canonical] {import_path} has no vendor file")
            return import_path

        vendor_file = self.vendor_file_reader(root / VENDOR_FILENAME)
        pkg = vendor_file.find_local(import_path)
        if pkg is None:
            return import_path
        logger.debug(f"[canonical] {import_path} -> {pkg.canonical}")
        return pkg.canonical
