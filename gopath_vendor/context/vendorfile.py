"""vendor.json manifest model.

A manifest sits at the root of a vendoring scope and lists every vendored
package with the import path it has inside the project (``local``) and the
upstream path it was copied from (``canonical``).
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .errors import VendorFileError

VENDOR_FILENAME = "vendor.json"


class VendorPackage(BaseModel):
    """One vendored package record."""

    model_config = ConfigDict(populate_by_name=True)

    canonical: str = Field(..., description="Upstream import path the copy came from")
    local: str = Field(..., description="Import path of the copy inside the project")
    revision: str = Field(default="", description="Revision the copy was taken at")
    revision_time: str | None = Field(default=None, alias="revisionTime")
    comment: str | None = None


class VendorFile(BaseModel):
    """Complete vendor manifest."""

    tool: str = ""
    comment: str = ""
    ignore: str = ""
    package: list[VendorPackage] = Field(default_factory=list)

    def find_local(self, import_path: str) -> VendorPackage | None:
        """Return the first record whose local path equals ``import_path``."""
        for pkg in self.package:
            if pkg.local == import_path:
                return pkg
        return None


def read_vendor_file(path: str | Path) -> VendorFile:
    """Parse the manifest at ``path``.

    Raises:
        OSError: the file could not be read
        VendorFileError: the content is not a valid manifest
    """
    path = Path(path)
    data = path.read_bytes()
    try:
        return VendorFile.model_validate(json.loads(data.decode("utf-8")))
    except UnicodeDecodeError as e:
        raise VendorFileError(path, f"not UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise VendorFileError(path, f"malformed JSON: {e}") from e
    except ValidationError as e:
        raise VendorFileError(path, str(e)) from e
