"""Shared regex fragments and string helpers for identifier normalizers."""

import re
import string

# Characters allowed between groups of digits ("0378-5955", "0378 5955").
SEPARATOR = "[\\x20" + re.escape(string.punctuation) + "]"

# Characters allowed in an LCCN alphabetic lead-in.
LEAD_IN = "[A-Za-z\\x20" + re.escape(string.punctuation) + "]"

# A "word:" form, e.g. "doi:10.1000/1" or "isbn: 123".
LABELLED_RE = re.compile(r"^[^:]+\s*:")

DIGITS_RE = re.compile(r"[0-9]")


def prefix_pattern(*labels: str) -> re.Pattern[str]:
    """Build a case-insensitive pattern for a leading scheme label.

    The label may be followed by a colon and/or whitespace but not by a
    letter, so "one" does not carry the "on" label. Labels are tried
    longest first so that e.g. "ocn" wins over "on".

    Parameters
    ----------
    *labels : str
        Literal labels (regex metacharacters are escaped).

    Returns
    -------
    re.Pattern[str]
        Pattern whose group 1 is the matched label.
    """
    ordered = sorted(labels, key=len, reverse=True)
    alternatives = "|".join(re.escape(label) for label in ordered)
    return re.compile(rf"^\s*({alternatives})(?![A-Za-z]):?\s*", re.IGNORECASE)


def remove_prefix(text: str, pattern: re.Pattern[str]) -> str:
    """Strip a leading label matched by ``pattern``."""
    return pattern.sub("", text, count=1)


def digits_of(text: str) -> str:
    """Return only the decimal digits of ``text``, in order."""
    return "".join(DIGITS_RE.findall(text))


def weighted_sum(digits: str, weights: list[int]) -> int:
    """Sum of ``digit * weight`` over the leading positions of ``digits``.

    Raises
    ------
    ValueError
        If ``digits`` has fewer positions than ``weights`` or a weighted
        position is not a decimal digit.
    """
    if len(digits) < len(weights):
        raise ValueError(f"Expected at least {len(weights)} digits, got {digits!r}")
    total = 0
    for digit, weight in zip(digits, weights):
        if digit not in string.digits:
            raise ValueError(f"Not a decimal digit: {digit!r} in {digits!r}")
        total += int(digit) * weight
    return total
