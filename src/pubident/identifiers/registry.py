"""Registry of identifier schemes.

The order of :data:`SCHEMES` is the order in which an unlabelled value is
tried against each scheme: schemes with a checksum first, then the
shape-only schemes.
"""

from pubident.errors import UnknownSchemeError

from . import isbn, issn, lccn, oclc, upc
from .models import IdentifierScheme

__all__ = ["SCHEMES", "get_scheme", "scheme_names"]

SCHEMES: dict[str, IdentifierScheme] = {
    module.SCHEME.name: module.SCHEME for module in (isbn, issn, upc, oclc, lccn)
}


def scheme_names() -> list[str]:
    """Registered scheme names in resolution order."""
    return list(SCHEMES)


def get_scheme(name: str) -> IdentifierScheme:
    """Look up a scheme by name (case-insensitive).

    Raises
    ------
    UnknownSchemeError
        If no scheme has that name.
    """
    try:
        return SCHEMES[name.strip().lower()]
    except KeyError:
        raise UnknownSchemeError(name, scheme_names()) from None
