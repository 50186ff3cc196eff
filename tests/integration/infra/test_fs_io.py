from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates the local file-access adapter, path normalization and the
OS-specific data directory resolution.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mdimports.core.ports import FileAccessPort
from mdimports.infra.fs import LocalFileAccess, get_user_data_dir, normalize_path

# -----------------------------------------------------------------------------
# FILE ACCESS ADAPTER TESTS
# -----------------------------------------------------------------------------

def test_local_file_access_satisfies_port() -> None:
    assert isinstance(LocalFileAccess(), FileAccessPort)


def test_exists_only_for_regular_files(tmp_path: Path) -> None:
    """TC-01: Directories and missing paths are not importable files."""
    doc = tmp_path / "doc.md"
    doc.write_text("# Doc", encoding="utf-8")
    fs = LocalFileAccess()

    assert fs.exists(str(doc)) is True
    assert fs.exists(str(tmp_path)) is False
    assert fs.exists(str(tmp_path / "missing.md")) is False


def test_read_text_utf8(tmp_path: Path) -> None:
    doc = tmp_path / "doc.md"
    doc.write_text("Línea con acentos\nSecond line", encoding="utf-8")

    assert LocalFileAccess().read_text(str(doc)) == "Línea con acentos\nSecond line"


def test_read_text_resilient_to_binary(tmp_path: Path) -> None:
    """TC-02: Invalid UTF-8 bytes are replaced, never raised."""
    doc = tmp_path / "corrupt.md"
    doc.write_bytes(b"start\n\x80\x81\xff\nend")

    text = LocalFileAccess().read_text(str(doc))

    assert text.startswith("start\n")
    assert "�" in text
    assert text.endswith("end")


def test_read_text_missing_raises_os_error(tmp_path: Path) -> None:
    """TC-03: The adapter lets OSError propagate to the processor."""
    with pytest.raises(OSError):
        LocalFileAccess().read_text(str(tmp_path / "missing.md"))

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_unix() -> None:
    """TC-04: Verify resolution of ~/.mdimports on Unix-like systems."""
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/testuser"):
            path = get_user_data_dir()
            assert path.replace("\\", "/").endswith("/home/testuser/.mdimports")


def test_normalize_path_expansion() -> None:
    """TC-05: Verify expansion of environment variables and fallback."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/doc.md", fallback=".")
        assert path.endswith(os.path.join("my_folder", "doc.md"))

    assert normalize_path("   ", fallback="/tmp") == os.path.abspath("/tmp")
