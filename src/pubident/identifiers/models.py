"""Value types for identifier schemes and parsed identifiers."""

import re
from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["IdentifierScheme", "PublicationIdentifier"]


@dataclass(frozen=True)
class IdentifierScheme:
    """Bundle of the three operations every identifier scheme provides.

    Attributes
    ----------
    name : str
        Lowercase scheme name used as the ``scheme:value`` prefix.
    label : str
        Display label (e.g. "ISSN").
    prefix : re.Pattern[str]
        Pattern matching the labels this scheme recognizes in raw input.
    is_candidate : Callable[[str], bool]
        Cheap, permissive shape test.
    is_valid : Callable[[str], bool]
        Full validation, including checksum where the scheme has one.
    normalize : Callable[..., str | None]
        Normalizer accepting ``(text, log=...)``; returns ``None`` on
        rejection.
    """

    name: str
    label: str
    prefix: re.Pattern[str]
    is_candidate: Callable[[str], bool]
    is_valid: Callable[[str], bool]
    normalize: Callable[..., str | None]


@dataclass(frozen=True)
class PublicationIdentifier:
    """A standard identifier for a published work.

    Attributes
    ----------
    scheme : str
        Scheme name ("isbn", "issn", "upc", "oclc", "lccn").
    value : str
        Normalized value when ``valid``, otherwise the input with any
        scheme label removed.
    valid : bool
        Whether ``value`` passed the scheme's validation.
    """

    scheme: str
    value: str
    valid: bool = True

    def __str__(self) -> str:
        return f"{self.scheme}:{self.value}"
