from __future__ import annotations

"""
Import Resolution Error Taxonomy.

Every failure the processor can meet while expanding a directive is modelled
as an exception carrying the literal path written in the directive. The
processor recovers from all of them locally: each error knows how to render
the inline marker that replaces its directive, and the severity at which it
is reported.
"""

from typing import Optional

from mdimports.domain.constants import (
    CIRCULAR_IMPORT_MARKER,
    IMPORT_FAILED_MARKER,
    REASON_ABSOLUTE_PATH,
    REASON_PATH_NOT_ALLOWED,
    REASON_UNSUPPORTED_TYPE,
    SUPPORTED_EXTENSION,
)

# -----------------------------------------------------------------------------
# BASE CLASS
# -----------------------------------------------------------------------------

class ImportResolutionError(Exception):
    """
    Base class for recoverable directive failures.

    Attributes:
        path: Literal path as written in the directive.
        reason: Short human readable cause embedded in the marker.
        level: Sink severity used when the failure is reported.
    """

    level: str = "warn"

    def __init__(self, path: str, reason: str, message: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(message or f"{path}: {reason}")

    def marker(self) -> str:
        """Render the inline marker that replaces the failed directive."""
        return IMPORT_FAILED_MARKER.format(path=self.path, reason=self.reason)


# -----------------------------------------------------------------------------
# POLICY VIOLATIONS (WARN)
# -----------------------------------------------------------------------------

class UnsupportedFileTypeError(ImportResolutionError):
    """Raised when a directive targets a file without the supported extension."""

    def __init__(self, path: str) -> None:
        super().__init__(
            path,
            REASON_UNSUPPORTED_TYPE,
            f"Import processor only supports {SUPPORTED_EXTENSION} files. "
            f"Attempting to import non-md file: {path}. This will fail.",
        )


class PathNotAllowedError(ImportResolutionError):
    """Raised when a directive resolves outside of the allowed directories."""

    def __init__(self, path: str, absolute: bool = False) -> None:
        self.absolute = absolute
        reason = REASON_ABSOLUTE_PATH if absolute else REASON_PATH_NOT_ALLOWED
        super().__init__(path, reason, f"Import path rejected: {path} ({reason})")


class CircularImportError(ImportResolutionError):
    """Raised when a directive targets a file already open in the ancestor chain."""

    def __init__(self, path: str, resolved_path: Optional[str] = None) -> None:
        self.resolved_path = resolved_path
        super().__init__(path, "Circular import detected", f"Circular import detected: {path}")

    def marker(self) -> str:
        return CIRCULAR_IMPORT_MARKER.format(path=self.path)


class DepthExceededError(ImportResolutionError):
    """Raised when the traversal reaches its configured depth ceiling."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            "",
            f"Maximum import depth ({max_depth}) reached",
            f"Maximum import depth ({max_depth}) reached. Stopping import processing.",
        )


# -----------------------------------------------------------------------------
# I/O FAILURES (ERROR)
# -----------------------------------------------------------------------------

class FileSystemFailureError(ImportResolutionError):
    """Raised when the file-access capability cannot confirm or read a target."""

    level = "error"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, reason, f"Failed to import {path}: {reason}")
