"""Resolve raw strings to publication identifiers.

A field value may hold several identifiers of different schemes, with or
without a "scheme:" label. :func:`create` decides which scheme a single
string belongs to; :func:`objects` and :func:`object_map` apply it to
every string in a multi-valued field.
"""

import re
from collections.abc import Iterable

from ._patterns import remove_prefix
from .models import IdentifierScheme, PublicationIdentifier
from .registry import SCHEMES, get_scheme

__all__ = [
    "cast",
    "create",
    "object_map",
    "objects",
    "split",
]

SPLIT_RE = re.compile(r" *[,;|\t\n] *")


def split(value: str | Iterable[str] | None) -> list[str]:
    """Split a field value into candidate identifier strings.

    Parameters
    ----------
    value : str | Iterable[str] | None
        One string, possibly holding several identifiers separated by
        ",", ";", "|", tabs or newlines, or an iterable of such strings.

    Returns
    -------
    list[str]
        Non-blank candidate strings in order.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    joined = "\n".join(value)
    return [part.strip() for part in SPLIT_RE.split(joined) if part.strip()]


def create(
    text: str,
    scheme: str | None = None,
    *,
    schemes: Iterable[str] | None = None,
) -> PublicationIdentifier | None:
    """Create a (possibly invalid) identifier from a raw string.

    Without ``scheme``, every registered scheme whose candidate test
    accepts the text is tried in registry order and the first valid
    reading wins. If none is valid, the reading returned (marked invalid)
    is the first one whose label the text carries, else the first one the
    scheme could still normalize ("036000291459" is a UPC with a wrong
    check digit), else the first candidate.

    An unlabelled 10-digit value can be read as either an OCN or an LCCN.
    If the digits could start with a four-digit year ("1..." or "20...")
    the LCCN reading is preferred.

    Parameters
    ----------
    text : str
        Raw identifier string.
    scheme : str | None, optional
        Read the text as this scheme only, candidate or not.
    schemes : Iterable[str] | None, optional
        Only try these scheme names (still in registry order).

    Returns
    -------
    PublicationIdentifier | None
        None if no scheme considers the text a candidate.

    Raises
    ------
    UnknownSchemeError
        If ``scheme`` or a name in ``schemes`` is not registered.
    """
    if not text or not text.strip():
        return None

    if scheme is not None:
        candidates = [get_scheme(scheme)]
    else:
        allowed = list(SCHEMES.values())
        if schemes is not None:
            names = {get_scheme(name).name for name in schemes}
            allowed = [s for s in allowed if s.name in names]
        candidates = [s for s in allowed if s.is_candidate(text)]
    if not candidates:
        return None

    readings = [_read(s, text) for s in candidates]
    valid = [r for r in readings if r.valid]

    names = {s.name for s in candidates}
    labelled = [s.prefix.match(text) is not None for s in candidates]
    ambiguous = scheme is None and {"oclc", "lccn"} <= names and not any(labelled)
    if ambiguous:
        lccn = next((r for r in valid if r.scheme == "lccn"), None)
        if lccn and len(lccn.value) == 10 and lccn.value.startswith(("1", "20")):
            return lccn

    if valid:
        return valid[0]
    for reading, has_label in zip(readings, labelled):
        if has_label:
            return reading
    for candidate, reading in zip(candidates, readings):
        if candidate.normalize(text, log=False):
            return reading
    return readings[0]


def cast(text: str, invalid: bool = False) -> PublicationIdentifier | None:
    """Like :func:`create`, but return None for invalid identifiers unless ``invalid``."""
    identifier = create(text)
    if identifier is not None and (invalid or identifier.valid):
        return identifier
    return None


def objects(
    value: str | Iterable[str] | None, invalid: bool = True
) -> list[PublicationIdentifier | None]:
    """Create identifiers for every candidate string in ``value``.

    With ``invalid`` True, unresolvable strings yield None entries so the
    result lines up with :func:`split`; otherwise they are dropped.
    """
    result = [cast(part, invalid=invalid) for part in split(value)]
    return result if invalid else [r for r in result if r is not None]


def object_map(
    value: str | Iterable[str] | None, invalid: bool = True
) -> dict[str, PublicationIdentifier | None]:
    """Map each candidate string in ``value`` to its identifier."""
    result = {part: cast(part, invalid=invalid) for part in split(value)}
    if invalid:
        return result
    return {k: v for k, v in result.items() if v is not None}


def _read(scheme: IdentifierScheme, text: str) -> PublicationIdentifier:
    normalized = scheme.normalize(text, log=False)
    if normalized and scheme.is_valid(text):
        return PublicationIdentifier(scheme.name, normalized, valid=True)
    return PublicationIdentifier(scheme.name, remove_prefix(text, scheme.prefix).strip(), valid=False)
