from __future__ import annotations

"""
Import Path Validator.

Security boundary for import directives. Decides whether a candidate path,
once resolved against the base directory, stays inside the allowlist.
Contains no I/O and no recursion so that it can be exercised exhaustively
on its own.
"""

import logging
import os
from typing import Sequence

from mdimports.domain.constants import URL_SCHEME_RE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_import_path(
        candidate_path: str,
        base_dir: str,
        allowed_dirs: Sequence[str],
) -> bool:
    """
    Check whether an import target is permitted.

    Args:
        candidate_path: Path exactly as written in the directive.
        base_dir: Directory relative candidates are resolved against.
        allowed_dirs: Directories the resolved path may live in.

    Returns:
        bool: True if the resolved path equals or descends from an allowed directory.
    """
    try:
        if is_url(candidate_path):
            return False

        resolved = resolve_import_path(candidate_path, base_dir)
        return any(is_within_directory(resolved, d) for d in allowed_dirs)
    except (TypeError, ValueError) as e:
        logger.debug(f"Rejecting unusable import path {candidate_path!r}: {e}")
        return False


def resolve_import_path(candidate_path: str, base_dir: str) -> str:
    """
    Resolve a directive path to a normalized absolute path.

    Absolute candidates are kept as-is; relative ones are anchored at base_dir.
    """
    if os.path.isabs(candidate_path):
        return os.path.normpath(candidate_path)
    return os.path.normpath(os.path.join(base_dir, candidate_path))


def is_url(candidate_path: str) -> bool:
    """Detect network or URL style references (http://, file://, ...)."""
    return bool(URL_SCHEME_RE.match(candidate_path))


def is_within_directory(path: str, directory: str) -> bool:
    """
    Segment-aware containment check.

    '/allowed' contains '/allowed' and '/allowed/x' but never '/allowed2/x'.

    Args:
        path: Normalized absolute path to test.
        directory: Candidate parent directory.

    Returns:
        bool: True if path equals directory or lives beneath it.
    """
    root = os.path.normpath(directory)
    if path == root:
        return True

    # A root such as '/' already ends with the separator
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)
