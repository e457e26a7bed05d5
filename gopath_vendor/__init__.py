"""gopath-vendor - GOPATH import resolution and vendor tree maintenance."""

from .context import Context
from .context import MissingManifestError
from .context import NotInWorkspaceError
from .context import remove_package

__version__ = "0.1.0"

__all__ = ["Context", "MissingManifestError", "NotInWorkspaceError", "remove_package", "__version__"]
