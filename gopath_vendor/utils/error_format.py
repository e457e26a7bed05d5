"""Safe error message formatting utilities.

Ensures exceptions always have useful display messages, even when their
str() representation is empty, and that paths in messages survive Rich
markup rendering.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

from ..context.errors import NotInWorkspaceError
from ..context.errors import VendorFileError

# Next steps shown under the error line, checked in order
ERROR_HINTS: dict[type, str] = {
    NotInWorkspaceError: "Check that GOPATH (--gopath or $GOPATH) lists the workspace holding this package.",
    VendorFileError: "Fix or regenerate vendor.json at the vendoring root.",
    PermissionError: "Check permissions on the workspace tree.",
}

# Friendly messages for exception types that usually carry no text
FRIENDLY_MESSAGES: dict[type, str] = {
    PermissionError: "Permission denied.",
    FileNotFoundError: "No such file or directory.",
    NotADirectoryError: "Not a directory.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'

        >>> format_error_message(PermissionError())
        'PermissionError: Permission denied.'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings."""
    return _escape_markup(str(value))


def error_hint(e: BaseException) -> str | None:
    """Return a next-step hint for workspace and manifest errors, if any."""
    for exc_type, hint in ERROR_HINTS.items():
        if isinstance(e, exc_type):
            return hint
    return None
