"""OCN (OCLC Control Number) detection, validation and normalization.

The number of digits expected depends on the prefix the value carries.
See https://www.oclc.org/developer/news/2012/oclc-control-number-expansion-in-2013.en.html
"""

import logging
import re

from ._patterns import LABELLED_RE, digits_of, prefix_pattern
from .models import IdentifierScheme

__all__ = [
    "OCLC_FORMAT",
    "SCHEME",
    "is_oclc_candidate",
    "is_valid_oclc",
    "to_oclc",
]

logger = logging.getLogger(__name__)

# Minimum/maximum digit counts per prefix; None means unbounded.
OCLC_FORMAT: dict[str, tuple[int, int | None]] = {
    "ocn": (8, 8),  # E.g. "ocn12345678"
    "ocm": (9, 9),  # E.g. "ocm123456789"
    "on": (10, 10),  # E.g. "on1234567890"
    "OCLC": (8, None),  # E.g. "OCLC:12345678"
    "OCoLC": (8, None),  # E.g. "OCoLC:12345678"
    "(OCoLC)": (8, None),  # E.g. "(OCoLC)12345678"
}

# Unprefixed values must be exactly eight digits, so a longer OCN only
# normalizes again when its prefix is kept.
DEFAULT_FORMAT: tuple[int, int | None] = (8, 8)

MIN_CANDIDATE_DIGITS = 8

OCLC_PREFIX_RE = prefix_pattern(*OCLC_FORMAT)

OCLC_CANDIDATE_RE = re.compile(r"[0-9]+(?:[^0-9][0-9]+)*")

_FORMAT_BY_PREFIX = {prefix.casefold(): minmax for prefix, minmax in OCLC_FORMAT.items()}


def is_oclc_candidate(text: str) -> bool:
    """Indicate whether the text could be an OCN.

    A recognized prefix makes the value a candidate regardless of what
    follows; the caller tells valid from invalid with :func:`is_valid_oclc`.
    An unprefixed "label:value" form is never a candidate. Anything else
    must be digit groups with at most one separator between groups and at
    least eight digits.

    Parameters
    ----------
    text : str
        Raw value.

    Returns
    -------
    bool
    """
    value = text.strip()
    if OCLC_PREFIX_RE.match(value):
        return True
    if LABELLED_RE.match(value):
        return False
    if not OCLC_CANDIDATE_RE.fullmatch(value):
        return False
    return len(digits_of(value)) >= MIN_CANDIDATE_DIGITS


def is_valid_oclc(text: str) -> bool:
    """Indicate whether the value normalizes to an OCN."""
    return to_oclc(text, log=False) is not None


def to_oclc(text: str, log: bool = True) -> str | None:
    """Return the OCN as a string of digits, or None.

    The digit count must fit the range implied by the prefix (eight digits
    when there is none). Numbers that are too short are zero-filled on the
    left up to the minimum first.

    Parameters
    ----------
    text : str
        Raw value, e.g. "ocm123456789" or "(OCoLC)1234".
    log : bool, optional
        Emit an informational log record on rejection, by default True.

    Returns
    -------
    str | None
    """
    value = text.strip()
    match = OCLC_PREFIX_RE.match(value)
    if match:
        minimum, maximum = _FORMAT_BY_PREFIX[match.group(1).casefold()]
        value = value[match.end() :]
    else:
        minimum, maximum = DEFAULT_FORMAT

    digits = digits_of(value)
    if digits:
        digits = digits.zfill(minimum)
        if maximum is None or len(digits) <= maximum:
            return digits

    if log:
        logger.info("to_oclc: %r is not a valid OCN", text)
    return None


SCHEME = IdentifierScheme(
    name="oclc",
    label="OCLC",
    prefix=OCLC_PREFIX_RE,
    is_candidate=is_oclc_candidate,
    is_valid=is_valid_oclc,
    normalize=to_oclc,
)
