from __future__ import annotations

"""
Allowed-Directory Resolver.

Pure path algebra: derives the import allowlist for a base directory
without touching the filesystem.
"""

import os
from typing import List


def compute_allowed_directories(base_dir: str) -> List[str]:
    """
    Compute the directories an import may resolve into.

    The list starts with the base directory and walks up one segment at a
    time. The filesystem root is never produced, since an entry for it
    would match every absolute path.

    Args:
        base_dir: Absolute directory path.

    Returns:
        List[str]: Ordered allowlist, nearest directory first.
    """
    current = os.path.normpath(base_dir)
    allowed: List[str] = []

    while not _is_root(current):
        allowed.append(current)
        current = os.path.dirname(current)

    return allowed


def _is_root(path: str) -> bool:
    """A path is a root when stripping a segment no longer changes it."""
    return os.path.dirname(path) == path
