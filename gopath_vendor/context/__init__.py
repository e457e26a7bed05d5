"""Workspace context: import path resolution and vendored package removal.

Public API:
- Context: resolves import paths against configured workspace roots
- find_root / walk_up / find_ancestor: bounded upward folder walks
- remove_package / prune_empty_dirs: vendored package removal
- read_vendor_file / VendorFile: vendor.json manifest
"""

from .errors import LoopLimitExceeded
from .errors import MissingManifestError
from .errors import NotInWorkspaceError
from .errors import VendorFileError
from .pathos import BUILTIN_PACKAGES
from .pathos import is_builtin_package
from .remove import PruneOutcome
from .remove import PruneStatus
from .remove import has_go_file_in_folder
from .remove import prune_empty_dirs
from .remove import remove_package
from .resolver import Context
from .vendorfile import VENDOR_FILENAME
from .vendorfile import VendorFile
from .vendorfile import VendorPackage
from .vendorfile import read_vendor_file
from .walker import LOOP_LIMIT
from .walker import find_ancestor
from .walker import find_root
from .walker import walk_up

__all__ = [
    "BUILTIN_PACKAGES",
    "Context",
    "LOOP_LIMIT",
    "LoopLimitExceeded",
    "MissingManifestError",
    "NotInWorkspaceError",
    "PruneOutcome",
    "PruneStatus",
    "VENDOR_FILENAME",
    "VendorFile",
    "VendorFileError",
    "VendorPackage",
    "find_ancestor",
    "find_root",
    "has_go_file_in_folder",
    "is_builtin_package",
    "prune_empty_dirs",
    "read_vendor_file",
    "remove_package",
    "walk_up",
]
