from __future__ import annotations

"""
Import Traversal Data Models.

Defines the immutable bookkeeping value threaded through recursive import
expansion. A state is never mutated: every descent derives a fresh value
from its parent, which keeps sibling directives isolated from each other.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional

from mdimports.domain.constants import DEFAULT_MAX_DEPTH

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ImportState:
    """
    Recursion bookkeeping for a single import traversal.

    Attributes:
        processed_files: Absolute paths already inlined in the ancestor chain.
        max_depth: Recursion ceiling, fixed for the whole traversal.
        current_depth: Zero at the root call, incremented once per descent.
        current_file: Absolute path of the document being expanded, if any.
    """
    processed_files: FrozenSet[str] = field(default_factory=frozenset)
    max_depth: int = DEFAULT_MAX_DEPTH
    current_depth: int = 0
    current_file: Optional[str] = None

    @property
    def depth_exhausted(self) -> bool:
        """True once no further expansion is permitted at this level."""
        return self.current_depth >= self.max_depth

    def has_visited(self, resolved_path: str) -> bool:
        """Check whether a target is already open in the ancestor chain."""
        return resolved_path == self.current_file or resolved_path in self.processed_files

    def descend(self, resolved_path: str) -> ImportState:
        """
        Derive the state used to expand an imported file.

        The parent's own file joins the visited set together with the new
        target, so a descendant importing any ancestor is caught as a cycle.

        Args:
            resolved_path: Absolute path of the file about to be expanded.

        Returns:
            ImportState: A new state one level deeper.
        """
        visited = set(self.processed_files)
        if self.current_file:
            visited.add(self.current_file)
        visited.add(resolved_path)

        return replace(
            self,
            processed_files=frozenset(visited),
            current_depth=self.current_depth + 1,
            current_file=resolved_path,
        )
