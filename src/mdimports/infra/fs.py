from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the concrete local-disk implementation of the file-access port,
together with path normalization and the OS-specific data directory used
for persistent configuration.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "MdImports"
UNIX_APP_DIR_NAME = ".mdimports"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/MdImports
    - Linux/Mac: ~/.mdimports

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILE ACCESS ADAPTER
# -----------------------------------------------------------------------------

class LocalFileAccess:
    """
    File-access port backed by the local filesystem.

    Reads use the 'replace' error strategy so that stray binary bytes in a
    document degrade to placeholder characters instead of aborting the
    whole traversal. Any OSError propagates to the caller.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        """Report whether a regular file exists at the given absolute path."""
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        """
        Read the full text content of a file.

        Args:
            path: Absolute path to the target file.

        Returns:
            str: Decoded file content.
        """
        with open(path, "r", encoding=self.encoding, errors="replace") as f:
            return f.read()
