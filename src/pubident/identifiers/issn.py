"""ISSN detection, validation and normalization.

An ISSN is eight positions: seven decimal digits followed by a mod-11
check character, which is a digit or 'X'.
"""

import logging
import re

from ._patterns import prefix_pattern, remove_prefix, weighted_sum
from .models import IdentifierScheme

__all__ = [
    "ISSN_DIGITS",
    "SCHEME",
    "contains_issn_candidate",
    "is_valid_issn",
    "issn_checksum",
    "to_issn",
]

logger = logging.getLogger(__name__)

ISSN_DIGITS = 8

ISSN_PREFIX_RE = prefix_pattern("ISSN")

# Digit groups, each optionally followed by one separator, optional 'X'.
ISSN_CANDIDATE_RE = re.compile(r"[0-9]+(?:[^0-9][0-9]+)*[^0-9]?X?", re.IGNORECASE)

# Digits, and an "X" that is not part of a word ("1050-124x" but not "box").
_ISSN_CHARS_RE = re.compile(r"[0-9]|(?<![A-Za-z])X(?![A-Za-z])", re.IGNORECASE)

# 8, 7, ..., 2 for the positions before the check character.
_WEIGHTS = [ISSN_DIGITS - index for index in range(ISSN_DIGITS - 1)]


def _strip(text: str) -> str:
    return remove_prefix(text, ISSN_PREFIX_RE).strip()


def contains_issn_candidate(text: str) -> bool:
    """Indicate whether the text has the shape of an ISSN.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled "ISSN" or "ISSN:".

    Returns
    -------
    bool
        True if the remainder is digit groups (optionally separated, with
        an optional trailing 'X') totalling eight positions. The check
        character is not verified.
    """
    value = _strip(text)
    if not ISSN_CANDIDATE_RE.fullmatch(value):
        return False
    count = sum(char.isascii() and char.isdigit() for char in value)
    if value[-1].upper() == "X":
        count += 1
    return count == ISSN_DIGITS


def is_valid_issn(text: str) -> bool:
    """Indicate whether the text is an ISSN with a correct check character.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled.

    Returns
    -------
    bool
        True if there are eight positions and the last one equals
        :func:`issn_checksum` of the seven before it.
    """
    value = _strip(text)
    if not value:
        return False
    check = value[-1].upper()
    digits = "".join(char for char in value if char.isascii() and char.isdigit())
    if check == "X":
        if not _ISSN_CHARS_RE.match(value, len(value) - 1):
            return False
        length = len(digits) + 1
    else:
        length = len(digits)
        digits = digits[:-1]
    if length != ISSN_DIGITS:
        return False
    return issn_checksum(digits) == check


def to_issn(text: str, log: bool = True) -> str | None:
    """Return the ISSN in normalized form, or None.

    The supplied check character is replaced with the computed one, so a
    wrong check character is silently repaired. An 'x' inside a word
    ("box") is not a check character.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled.
    log : bool, optional
        Emit an informational log record on rejection, by default True.

    Returns
    -------
    str | None
        Seven digits plus computed check character, no separators.
    """
    chars = "".join(_ISSN_CHARS_RE.findall(_strip(text))).upper()
    body = chars[:-1]
    if len(chars) != ISSN_DIGITS or not body.isdigit():
        if log:
            logger.info("to_issn: %r is not a valid ISSN", text)
        return None
    return body + issn_checksum(body)


def issn_checksum(digits: str) -> str:
    """Calculate the ISSN check character.

    Only the first seven positions are weighted; a trailing check digit in
    ``digits`` is ignored.

    Parameters
    ----------
    digits : str
        At least seven decimal digits.

    Returns
    -------
    str
        'X' when the remainder is 10, otherwise the remainder as a string.
        A total divisible by 11 gives "11" rather than "0".

    Raises
    ------
    ValueError
        If fewer than seven digits are given.
    """
    total = weighted_sum(digits, _WEIGHTS)
    remainder = 11 - (total % 11)
    # Remainder 11 stays "11"; ISO 3297 would give "0".
    return "X" if remainder == 10 else str(remainder)


SCHEME = IdentifierScheme(
    name="issn",
    label="ISSN",
    prefix=ISSN_PREFIX_RE,
    is_candidate=contains_issn_candidate,
    is_valid=is_valid_issn,
    normalize=to_issn,
)
