from __future__ import annotations

from .directories import compute_allowed_directories
from .processor import process_file, process_imports
from .validator import validate_import_path

__all__ = [
    "compute_allowed_directories",
    "process_file",
    "process_imports",
    "validate_import_path",
]
