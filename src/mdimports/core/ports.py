from __future__ import annotations

"""
Capability Ports for the Import Processor.

The processor never touches the disk or a logger directly. Embedding
applications supply these capabilities; tests substitute in-memory fakes.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAccessPort(Protocol):
    """Port for file existence checks and text reads."""

    def exists(self, path: str) -> bool:
        """Check if a file exists. Any exception is treated as an access failure."""
        ...

    def read_text(self, path: str) -> str:
        """Read a file as text. Any exception is treated as a read failure."""
        ...


@runtime_checkable
class LogSinkPort(Protocol):
    """Port receiving structured processor diagnostics."""

    def log(self, level: str, tag: str, message: str) -> None:
        """Record a message. Level is one of 'warn', 'error' or 'debug'."""
        ...
