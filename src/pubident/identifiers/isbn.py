"""ISBN-10 and ISBN-13 detection, validation and conversion."""

import logging
import re

from ._patterns import SEPARATOR, prefix_pattern, remove_prefix, weighted_sum
from .models import IdentifierScheme

__all__ = [
    "ISBN_10_DIGITS",
    "ISBN_13_DIGITS",
    "SCHEME",
    "is_isbn10",
    "is_isbn13",
    "is_isbn_candidate",
    "is_valid_isbn",
    "isbn10_checksum",
    "isbn13_checksum",
    "to_isbn",
    "to_isbn10",
    "to_isbn13",
]

logger = logging.getLogger(__name__)

ISBN_10_DIGITS = 10
ISBN_13_DIGITS = 13

# ISBN-13 prefix for books; the only range that maps back to ISBN-10.
BOOKLAND = "978"

ISBN_PREFIX_RE = prefix_pattern("ISBN")

ISBN_IDENTIFIER_RE = re.compile(
    rf"""
      (?:[0-9]{SEPARATOR}*){{{ISBN_10_DIGITS - 1}}} [0-9X] {SEPARATOR}*
    | (?:[0-9]{SEPARATOR}*){{{ISBN_13_DIGITS}}}
    """,
    re.IGNORECASE | re.VERBOSE,
)

# One too few to one too many positions.
ISBN_CANDIDATE_RE = re.compile(
    rf"(?:[0-9]{SEPARATOR}*){{{ISBN_10_DIGITS - 2},{ISBN_13_DIGITS}}}[0-9X]{SEPARATOR}*",
    re.IGNORECASE,
)

_ISBN_CHARS_RE = re.compile(r"[0-9X]", re.IGNORECASE)

_ISBN10_WEIGHTS = [ISBN_10_DIGITS - index for index in range(ISBN_10_DIGITS - 1)]
_ISBN13_WEIGHTS = [1 if index % 2 == 0 else 3 for index in range(ISBN_13_DIGITS - 1)]


def _identifier(text: str) -> str | None:
    """Return the unlabelled ISBN characters if the value is ISBN-shaped."""
    value = remove_prefix(text, ISBN_PREFIX_RE).strip()
    if not ISBN_IDENTIFIER_RE.fullmatch(value):
        return None
    return "".join(_ISBN_CHARS_RE.findall(value)).upper()


def is_isbn_candidate(text: str) -> bool:
    """Indicate whether the text appears to be an ISBN.

    An "ISBN" label followed by anything makes the value a candidate.
    """
    value = text.strip()
    match = ISBN_PREFIX_RE.match(value)
    if match:
        return bool(value[match.end() :].strip())
    return bool(ISBN_CANDIDATE_RE.fullmatch(value))


def is_isbn10(text: str) -> bool:
    """Indicate whether the value is a valid ISBN-10."""
    chars = _identifier(text)
    if chars is None or len(chars) != ISBN_10_DIGITS or not chars[:-1].isdigit():
        return False
    return isbn10_checksum(chars[:-1]) == chars[-1]


def is_isbn13(text: str) -> bool:
    """Indicate whether the value is a valid ISBN-13."""
    chars = _identifier(text)
    if chars is None or len(chars) != ISBN_13_DIGITS or not chars.isdigit():
        return False
    return isbn13_checksum(chars[:-1]) == chars[-1]


def is_valid_isbn(text: str) -> bool:
    """Indicate whether the value is a valid ISBN-10 or ISBN-13."""
    return is_isbn13(text) or is_isbn10(text)


def to_isbn13(text: str, log: bool = True) -> str | None:
    """Return the value as an ISBN-13.

    A valid ISBN-10 is converted to the equivalent "978" ISBN-13.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled "ISBN".
    log : bool, optional
        Emit an informational log record on rejection, by default True.

    Returns
    -------
    str | None
        Thirteen digits, or None if the value is not a valid ISBN.
    """
    if is_isbn13(text):
        return _identifier(text)
    if is_isbn10(text):
        body = BOOKLAND + _identifier(text)[:-1]
        return body + isbn13_checksum(body)
    if log:
        logger.info("to_isbn13: %r is not a valid ISBN", text)
    return None


def to_isbn10(text: str, log: bool = True) -> str | None:
    """Return the value as an ISBN-10.

    A valid ISBN-13 is converted only if it is in the "978" range.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled "ISBN".
    log : bool, optional
        Emit an informational log record on rejection, by default True.

    Returns
    -------
    str | None
    """
    if is_isbn10(text):
        return _identifier(text)
    if is_isbn13(text):
        chars = _identifier(text)
        if chars.startswith(BOOKLAND):
            body = chars[len(BOOKLAND) : -1]
            return body + isbn10_checksum(body)
        if log:
            logger.info("to_isbn10: cannot convert %r", text)
        return None
    if log:
        logger.info("to_isbn10: %r is not a valid ISBN", text)
    return None


to_isbn = to_isbn13


def isbn10_checksum(digits: str) -> str:
    """ISBN-10 check character for the first nine digits ('X' for 10)."""
    remainder = (11 - weighted_sum(digits, _ISBN10_WEIGHTS) % 11) % 11
    return "X" if remainder == 10 else str(remainder)


def isbn13_checksum(digits: str) -> str:
    """ISBN-13 check digit for the first twelve digits."""
    return str((10 - weighted_sum(digits, _ISBN13_WEIGHTS) % 10) % 10)


SCHEME = IdentifierScheme(
    name="isbn",
    label="ISBN",
    prefix=ISBN_PREFIX_RE,
    is_candidate=is_isbn_candidate,
    is_valid=is_valid_isbn,
    normalize=to_isbn,
)
