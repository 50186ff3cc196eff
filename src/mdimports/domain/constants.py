from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the import directive grammar, the supported document extension,
the traversal limits and the exact marker templates embedded in processed
output. Marker text is part of the output contract and must not change.
"""

import re
from typing import Pattern

CURRENT_CONFIG_VERSION = "1.0.0"

# Tag attached to every structured message emitted by the processor
LOG_TAG = "ImportProcessor"

# -----------------------------------------------------------------------------
# DIRECTIVE GRAMMAR
# -----------------------------------------------------------------------------

SUPPORTED_EXTENSION = ".md"
DEFAULT_MAX_DEPTH = 10

# '@' followed by the maximal run of non-whitespace characters
IMPORT_DIRECTIVE_RE: Pattern[str] = re.compile(r"@(\S+)")

# Any 'scheme://' prefix (http, https, file, ftp, ...)
URL_SCHEME_RE: Pattern[str] = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# -----------------------------------------------------------------------------
# OUTPUT MARKERS
# -----------------------------------------------------------------------------

IMPORT_START_MARKER = "<!-- Imported from: {path} -->"
IMPORT_END_MARKER = "<!-- End of import from: {path} -->"
IMPORT_FAILED_MARKER = "<!-- Import failed: {path} - {reason} -->"
CIRCULAR_IMPORT_MARKER = "<!-- Circular import detected: {path} -->"

REASON_UNSUPPORTED_TYPE = "Only .md files are supported"
REASON_ABSOLUTE_PATH = "Absolute paths not allowed"
REASON_PATH_NOT_ALLOWED = "Path not allowed"
REASON_FILE_NOT_FOUND = "File not found"
