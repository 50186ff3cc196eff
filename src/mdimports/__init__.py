from __future__ import annotations

"""
mdimports: recursive '@path' import resolution for markdown documents.
"""

from mdimports.core.ports import FileAccessPort, LogSinkPort
from mdimports.core.resolution import (
    compute_allowed_directories,
    process_file,
    process_imports,
    validate_import_path,
)
from mdimports.domain.errors import (
    CircularImportError,
    DepthExceededError,
    FileSystemFailureError,
    ImportResolutionError,
    PathNotAllowedError,
    UnsupportedFileTypeError,
)
from mdimports.domain.import_models import ImportState
from mdimports.infra.fs import LocalFileAccess
from mdimports.infra.logging import LoggingSink

__version__ = "1.0.0"

__all__ = [
    "CircularImportError",
    "DepthExceededError",
    "FileAccessPort",
    "FileSystemFailureError",
    "ImportResolutionError",
    "ImportState",
    "LocalFileAccess",
    "LogSinkPort",
    "LoggingSink",
    "PathNotAllowedError",
    "UnsupportedFileTypeError",
    "compute_allowed_directories",
    "process_file",
    "process_imports",
    "validate_import_path",
]
