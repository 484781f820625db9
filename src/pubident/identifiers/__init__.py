"""Identifier normalizers.

Each scheme module is a set of pure functions over a single string:
a candidate test, a validator and a normalizer. The registry and
:mod:`pubident.identifiers.publication` tie them together.
"""

from .isbn import is_isbn10, is_isbn13, is_isbn_candidate, is_valid_isbn, to_isbn, to_isbn10, to_isbn13
from .issn import contains_issn_candidate, is_valid_issn, issn_checksum, to_issn
from .lccn import is_lccn_candidate, is_valid_lccn, to_lccn
from .models import IdentifierScheme, PublicationIdentifier
from .oclc import is_oclc_candidate, is_valid_oclc, to_oclc
from .publication import cast, create, object_map, objects, split
from .registry import SCHEMES, get_scheme, scheme_names
from .upc import is_upc_candidate, is_valid_upc, to_upc, upc_checksum

__all__ = [
    "SCHEMES",
    "IdentifierScheme",
    "PublicationIdentifier",
    "cast",
    "contains_issn_candidate",
    "create",
    "get_scheme",
    "is_isbn10",
    "is_isbn13",
    "is_isbn_candidate",
    "is_lccn_candidate",
    "is_oclc_candidate",
    "is_upc_candidate",
    "is_valid_isbn",
    "is_valid_issn",
    "is_valid_lccn",
    "is_valid_oclc",
    "is_valid_upc",
    "issn_checksum",
    "object_map",
    "objects",
    "scheme_names",
    "split",
    "to_isbn",
    "to_isbn10",
    "to_isbn13",
    "to_issn",
    "to_lccn",
    "to_oclc",
    "to_upc",
    "upc_checksum",
]
