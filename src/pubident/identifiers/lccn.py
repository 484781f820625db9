"""LCCN (Library of Congress Control Number) detection and normalization.

An LCCN has no check digit; it is recognized by its shape alone: an
optional alphabetic lead-in followed by 8, 9 or 10 digits.
"""

import logging
import re

from ._patterns import LEAD_IN, digits_of, prefix_pattern, remove_prefix
from .models import IdentifierScheme

__all__ = [
    "LCCN_DIGIT_COUNTS",
    "SCHEME",
    "is_lccn_candidate",
    "is_valid_lccn",
    "to_lccn",
]

logger = logging.getLogger(__name__)

LCCN_DIGIT_COUNTS = frozenset({8, 9, 10})

LCCN_PREFIX_RE = prefix_pattern("LCCN")

LCCN_CANDIDATE_RE = re.compile(
    rf"""
    (?:
        {LEAD_IN}{{0,3}} [0-9]{{8}} .?   # "n 79021164", "agr25000010"
      | {LEAD_IN}{{0,3}} [0-9]{{9}}
      | {LEAD_IN}{{0,2}} [0-9]{{10}}     # "2001012345", "sn2001012345"
    )
    (?:/.*)?                             # "85000002/AC/r86"
    """,
    re.VERBOSE,
)


def _strip(text: str) -> str:
    return remove_prefix(text, LCCN_PREFIX_RE).strip()


def is_lccn_candidate(text: str) -> bool:
    """Indicate whether the text could be an LCCN.

    An explicit "LCCN" label makes any value a candidate.
    """
    value = text.strip()
    if LCCN_PREFIX_RE.match(value):
        return True
    return bool(LCCN_CANDIDATE_RE.fullmatch(value))


def is_valid_lccn(text: str) -> bool:
    """Indicate whether the value normalizes to an LCCN."""
    return bool(to_lccn(text, log=False))


def to_lccn(text: str, log: bool = True) -> str | None:
    """Return the LCCN without its label and revision suffix, or None.

    Letters and spaces in the number are kept; only the count of digits is
    checked.

    Parameters
    ----------
    text : str
        Raw value, e.g. "lccn: 2001012345" or "n 79021164/AC".
    log : bool, optional
        Emit an informational log record on rejection, by default True.

    Returns
    -------
    str | None
        The trimmed value before any "/" if it holds 8, 9 or 10 digits.
    """
    value = _strip(text).split("/", 1)[0].strip()
    if len(digits_of(value)) in LCCN_DIGIT_COUNTS:
        return value
    if log:
        logger.info("to_lccn: %r is not a valid LCCN", text)
    return None


SCHEME = IdentifierScheme(
    name="lccn",
    label="LCCN",
    prefix=LCCN_PREFIX_RE,
    is_candidate=is_lccn_candidate,
    is_valid=is_valid_lccn,
    normalize=to_lccn,
)
