"""Normalization and validation of bibliographic identifiers.

This package provides:
- Identifier normalizers (pubident.identifiers): ISBN, ISSN, UPC, OCLC, LCCN
- Batch checking (pubident.api): values, files, JSONL export
- Configuration (pubident.config): batch check settings and results
- Audit (pubident.audit): JSONL event log of batch runs
- CLI (pubident.cli): command-line interface
"""

__version__ = "0.4.0"
__license__ = "MIT"

from pubident.api import check_file, check_values, normalize_value, write_jsonl
from pubident.config import CheckConfig, IdentifierResult
from pubident.errors import ChecksumMismatchError, IdentifierError, UnknownSchemeError
from pubident.identifiers import PublicationIdentifier, create

__all__ = [
    "__version__",
    "__license__",
    "CheckConfig",
    "ChecksumMismatchError",
    "IdentifierError",
    "IdentifierResult",
    "PublicationIdentifier",
    "UnknownSchemeError",
    "check_file",
    "check_values",
    "create",
    "normalize_value",
    "write_jsonl",
]
