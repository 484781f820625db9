"""UPC detection, validation and normalization.

A UPC-A is eleven digits followed by a mod-10 check digit. Some forms
carry supplemental digits after the check digit; these are kept as-is.
"""

import logging

from pubident.errors import ChecksumMismatchError

from ._patterns import digits_of, prefix_pattern, remove_prefix, weighted_sum
from .models import IdentifierScheme

__all__ = [
    "UPC_DIGITS",
    "SCHEME",
    "is_upc_candidate",
    "is_valid_upc",
    "to_upc",
    "upc_checksum",
]

logger = logging.getLogger(__name__)

# Including the check digit.
UPC_DIGITS = 12

UPC_PREFIX_RE = prefix_pattern("UPC")

_CHECK = UPC_DIGITS - 1  # Position of the check digit.

_WEIGHTS = [3 if index % 2 == 0 else 1 for index in range(_CHECK)]


def _strip(text: str) -> str:
    return remove_prefix(text, UPC_PREFIX_RE).strip()


def is_upc_candidate(text: str) -> bool:
    """Indicate whether the text could be a UPC.

    An explicit "UPC" label makes any value a candidate; otherwise the
    value must be at least twelve digits and nothing else.
    """
    value = text.strip()
    if UPC_PREFIX_RE.match(value):
        return True
    return value.isascii() and value.isdigit() and len(value) >= UPC_DIGITS


def is_valid_upc(text: str) -> bool:
    """Indicate whether the twelfth digit is the correct check digit.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled.

    Returns
    -------
    bool
    """
    digits = digits_of(_strip(text))
    if len(digits) < UPC_DIGITS:
        return False
    return upc_checksum(digits[:_CHECK]) == digits[_CHECK]


def to_upc(text: str, log: bool = True, validate: bool = False) -> str | None:
    """Return the UPC as a string of digits, or None.

    Eleven digits are taken as a UPC without its check digit, which is
    appended. With twelve or more digits the supplied check digit is
    replaced by the computed one and any supplemental digits are kept.

    Parameters
    ----------
    text : str
        Raw value, optionally labelled.
    log : bool, optional
        Emit an informational log record on rejection, by default True.
    validate : bool, optional
        Raise instead of repairing a wrong check digit, by default False.

    Returns
    -------
    str | None
        Normalized digits, or None if there are fewer than eleven.

    Raises
    ------
    ChecksumMismatchError
        If ``validate`` is True and the supplied check digit is wrong.
    """
    digits = digits_of(_strip(text))
    if len(digits) < _CHECK:
        if log:
            logger.info("to_upc: %r is not a valid UPC", text)
        return None

    body = digits[:_CHECK]
    supplied = digits[_CHECK : _CHECK + 1]
    added = digits[_CHECK + 1 :]
    check = upc_checksum(body)
    if validate and supplied and supplied != check:
        if log:
            logger.info("to_upc: %r: check digit should be %s", text, check)
        raise ChecksumMismatchError(text, expected=check, supplied=supplied)
    return f"{body}{check}{added}"


def upc_checksum(digits: str) -> str:
    """Calculate the UPC check digit over the first eleven digits.

    Raises
    ------
    ValueError
        If fewer than eleven digits are given.
    """
    total = weighted_sum(digits, _WEIGHTS)
    return str((10 - total % 10) % 10)


SCHEME = IdentifierScheme(
    name="upc",
    label="UPC",
    prefix=UPC_PREFIX_RE,
    is_candidate=is_upc_candidate,
    is_valid=is_valid_upc,
    normalize=to_upc,
)
