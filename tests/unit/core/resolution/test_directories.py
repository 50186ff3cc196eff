from __future__ import annotations

"""
Unit tests for the Allowed-Directory Resolver.

Verifies:
1. The base directory always leads the allowlist.
2. Every ancestor is listed, nearest first.
3. The filesystem root is never produced.
"""

from mdimports.core.resolution.directories import compute_allowed_directories


def test_includes_base_directory() -> None:
    """TC-01: The base directory is the first entry."""
    allowed = compute_allowed_directories("/test/path/subdir")
    assert allowed[0] == "/test/path/subdir"


def test_lists_all_parents_up_to_root() -> None:
    """TC-02: Each parent directory is listed, stopping before '/'."""
    assert compute_allowed_directories("/a/b/c/d") == [
        "/a/b/c/d",
        "/a/b/c",
        "/a/b",
        "/a",
    ]


def test_single_level_below_root() -> None:
    """TC-03: A directory directly under the root has no ancestors."""
    assert compute_allowed_directories("/a") == ["/a"]


def test_deep_paths() -> None:
    """TC-04: Deep hierarchies produce one entry per segment."""
    base = "/very/deep/nested/path/with/many/levels"
    allowed = compute_allowed_directories(base)

    assert len(allowed) == 7
    assert allowed[0] == base
    assert allowed[1] == "/very/deep/nested/path/with/many"
    assert allowed[-1] == "/very"


def test_root_never_included() -> None:
    """TC-05: '/' is never part of the allowlist."""
    allowed = compute_allowed_directories("/projects/myproject")

    assert allowed == ["/projects/myproject", "/projects"]
    assert "/" not in allowed


def test_trailing_separator_is_normalized() -> None:
    """TC-06: A trailing separator does not create a duplicate entry."""
    assert compute_allowed_directories("/a/b/") == ["/a/b", "/a"]


def test_root_itself_yields_empty_allowlist() -> None:
    """TC-07: Starting at the root leaves nothing to allow."""
    assert compute_allowed_directories("/") == []
