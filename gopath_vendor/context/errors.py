"""Error taxonomy for workspace resolution and vendor tree removal.

- NotInWorkspaceError: path matched no configured workspace root
- MissingManifestError: no vendor manifest governs a folder ("not vendored")
- VendorFileError: a manifest exists but could not be parsed
- LoopLimitExceeded: an upward walk never reached the filesystem root

I/O failures are not wrapped; OSError propagates as raised by the os layer.
"""

from __future__ import annotations

from pathlib import Path


class NotInWorkspaceError(Exception):
    """Raised when an import path or directory is outside every workspace root."""

    def __init__(self, path: str | Path, relative: str | Path | None = None):
        self.path = str(path)
        self.relative = str(relative) if relative else None
        message = f"Package {self.path!r} not a go package or not in GOPATH"
        if self.relative:
            message += f" (relative to {self.relative!r})"
        super().__init__(message)


class MissingManifestError(Exception):
    """Raised when no ancestor folder holds the vendor manifest.

    Callers treat this as "no vendoring in effect", not as a failure.
    """

    def __init__(self, folder: str | Path, marker: str):
        self.folder = Path(folder)
        self.marker = marker
        super().__init__(f"Unable to find {marker} above {self.folder}")


class VendorFileError(Exception):
    """Raised when a vendor manifest cannot be parsed."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid vendor file {self.path}: {reason}")


class LoopLimitExceeded(BaseException):
    """An upward directory walk exceeded its iteration cap.

    Derives from BaseException so ``except Exception`` handlers do not catch
    it. Well-formed absolute paths always reach the filesystem root first.
    """

    def __init__(self, start: str | Path, limit: int):
        self.start = Path(start)
        self.limit = limit
        super().__init__(f"walk from {self.start} exceeded loop limit of {limit}")
