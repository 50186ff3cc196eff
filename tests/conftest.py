from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. In-memory fakes for the file-access and log-sink ports.
"""

import os
import sys
from typing import Dict, List, Optional, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Port Fakes
# -----------------------------------------------------------------------------
class FakeFileAccess:
    """
    Dictionary-backed file-access port.

    Records every exists/read call so tests can assert on I/O order and on
    the absence of I/O for rejected directives.
    """

    def __init__(
            self,
            files: Optional[Dict[str, str]] = None,
            exists_error: Optional[Exception] = None,
            read_error: Optional[Exception] = None,
    ) -> None:
        self.files: Dict[str, str] = dict(files or {})
        self.exists_error = exists_error
        self.read_error = read_error
        self.exists_calls: List[str] = []
        self.read_calls: List[str] = []

    def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        if self.exists_error is not None:
            raise self.exists_error
        return path in self.files

    def read_text(self, path: str) -> str:
        self.read_calls.append(path)
        if self.read_error is not None:
            raise self.read_error
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.files[path]


class RecordingSink:
    """Log-sink port that keeps every (level, tag, message) triple."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, str]] = []

    def log(self, level: str, tag: str, message: str) -> None:
        self.records.append((level, tag, message))

    def messages(self, level: str) -> List[str]:
        return [m for (lvl, _, m) in self.records if lvl == level]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def make_fs():
    """Factory fixture building a FakeFileAccess from a path->content mapping."""
    def _make(files: Optional[Dict[str, str]] = None, **kwargs) -> FakeFileAccess:
        return FakeFileAccess(files, **kwargs)
    return _make
