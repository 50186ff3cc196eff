from __future__ import annotations

"""
Recursive Import Processor.

Expands '@path' directives in markdown-like text by inlining the referenced
documents, recursing into each inlined document with a derived traversal
state. Directives are handled strictly one at a time in reading order.
Every failure is recovered locally: the directive is replaced by a marker
and the failure is reported through the log sink, so the caller always
gets the complete, possibly degraded, document back.
"""

import os
from typing import List, Optional, Sequence

from mdimports.core.ports import FileAccessPort, LogSinkPort
from mdimports.core.resolution.directories import compute_allowed_directories
from mdimports.core.resolution.validator import (
    is_url,
    resolve_import_path,
    validate_import_path,
)
from mdimports.domain.constants import (
    DEFAULT_MAX_DEPTH,
    IMPORT_DIRECTIVE_RE,
    IMPORT_END_MARKER,
    IMPORT_START_MARKER,
    LOG_TAG,
    REASON_FILE_NOT_FOUND,
    SUPPORTED_EXTENSION,
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
from mdimports.infra.logging.sink import LoggingSink

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def process_imports(
        content: str,
        base_dir: str,
        imports_enabled: bool = True,
        state: Optional[ImportState] = None,
        *,
        file_access: Optional[FileAccessPort] = None,
        sink: Optional[LogSinkPort] = None,
        allowed_directories: Optional[Sequence[str]] = None,
) -> str:
    """
    Inline every import directive found in the content.

    Args:
        content: Text to scan for '@path' directives.
        base_dir: Absolute directory relative directives are resolved against.
        imports_enabled: When False the content is returned untouched.
        state: Traversal bookkeeping. A fresh root state is used if omitted.
        file_access: Existence/read capability. Defaults to the local disk.
        sink: Diagnostic capability. Defaults to the stdlib logging bridge.
        allowed_directories: Explicit allowlist applied at every level instead
                             of the one computed from each base directory.

    Returns:
        str: Content with directives replaced by import blocks or markers.
    """
    if not imports_enabled:
        return content

    state = state or ImportState()
    fs = file_access or LocalFileAccess()
    log = sink or LoggingSink()

    # Depth gates the whole pass, not individual directives
    if state.depth_exhausted:
        err = DepthExceededError(state.max_depth)
        log.log(err.level, LOG_TAG, str(err))
        return content

    allowed = (
        list(allowed_directories)
        if allowed_directories is not None
        else compute_allowed_directories(base_dir)
    )

    pieces: List[str] = []
    cursor = 0
    for match in IMPORT_DIRECTIVE_RE.finditer(content):
        pieces.append(content[cursor:match.start()])
        try:
            pieces.append(_expand_directive(
                match.group(1), base_dir, allowed, state, fs, log, allowed_directories
            ))
        except ImportResolutionError as e:
            log.log(e.level, LOG_TAG, str(e))
            pieces.append(e.marker())
        cursor = match.end()

    if not pieces:
        return content

    pieces.append(content[cursor:])
    return "".join(pieces)


def process_file(
        file_path: str,
        imports_enabled: bool = True,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        file_access: Optional[FileAccessPort] = None,
        sink: Optional[LogSinkPort] = None,
) -> str:
    """
    Read a document from storage and expand its imports.

    The document itself becomes the current file of the root state, so a
    self-import is reported as circular. Unlike nested imports, a failure
    to read the root document cannot be replaced by a marker and is raised.

    Args:
        file_path: Path to the root document.
        imports_enabled: When False the raw document is returned.
        max_depth: Recursion ceiling for the traversal.
        file_access: Existence/read capability. Defaults to the local disk.
        sink: Diagnostic capability. Defaults to the stdlib logging bridge.

    Returns:
        str: The processed document.

    Raises:
        FileSystemFailureError: If the root document cannot be read.
    """
    fs = file_access or LocalFileAccess()
    resolved = os.path.abspath(file_path)

    try:
        content = fs.read_text(resolved)
    except Exception as e:
        raise FileSystemFailureError(file_path, _failure_reason(e)) from e

    state = ImportState(max_depth=max_depth, current_file=resolved)
    return process_imports(
        content,
        os.path.dirname(resolved),
        imports_enabled,
        state,
        file_access=fs,
        sink=sink,
    )

# -----------------------------------------------------------------------------
# DIRECTIVE PIPELINE
# -----------------------------------------------------------------------------

def _expand_directive(
        import_path: str,
        base_dir: str,
        allowed: Sequence[str],
        state: ImportState,
        fs: FileAccessPort,
        log: LogSinkPort,
        explicit_allowlist: Optional[Sequence[str]],
) -> str:
    """
    Run one directive through type, boundary, cycle and I/O checks.

    Raises:
        ImportResolutionError: For any failure; the caller renders its marker.
    """
    # 1. Extension check (no file access for unsupported types)
    if not import_path.endswith(SUPPORTED_EXTENSION):
        raise UnsupportedFileTypeError(import_path)

    # 2. Security boundary
    if not validate_import_path(import_path, base_dir, allowed):
        absolute = os.path.isabs(import_path) and not is_url(import_path)
        raise PathNotAllowedError(import_path, absolute=absolute)

    # 3. Cycle detection against the ancestor chain
    resolved = resolve_import_path(import_path, base_dir)
    if state.has_visited(resolved):
        raise CircularImportError(import_path, resolved)

    log.log("debug", LOG_TAG, f"Processing import: {import_path} -> {resolved}")

    # 4. Existence + read
    imported = _load(import_path, resolved, fs)

    # 5. Recurse from the imported file's own directory
    body = process_imports(
        imported,
        os.path.dirname(resolved),
        True,
        state.descend(resolved),
        file_access=fs,
        sink=log,
        allowed_directories=explicit_allowlist,
    )

    return "\n".join([
        IMPORT_START_MARKER.format(path=import_path),
        body,
        IMPORT_END_MARKER.format(path=import_path),
    ])


def _load(import_path: str, resolved: str, fs: FileAccessPort) -> str:
    """Confirm existence then read the target through the file-access port."""
    try:
        found = fs.exists(resolved)
    except Exception as e:
        raise FileSystemFailureError(import_path, _failure_reason(e)) from e

    if not found:
        raise FileSystemFailureError(import_path, REASON_FILE_NOT_FOUND)

    try:
        return fs.read_text(resolved)
    except Exception as e:
        raise FileSystemFailureError(import_path, _failure_reason(e)) from e


def _failure_reason(exc: BaseException) -> str:
    """Prefer the OS error text without errno and filename decorations; fall back to the message or type name."""
    strerror = getattr(exc, "strerror", None)
    return strerror or str(exc) or type(exc).__name__
