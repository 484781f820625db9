"""Exceptions raised by pubident.

Malformed identifiers are not errors: normalizers return ``None`` and
validators return ``False``. Exceptions are reserved for the cases where
the caller explicitly demanded correctness or named something unknown.
"""

__all__ = [
    "IdentifierError",
    "ChecksumMismatchError",
    "UnknownSchemeError",
]


class IdentifierError(ValueError):
    """Base class for identifier errors."""


class ChecksumMismatchError(IdentifierError):
    """Raised when a supplied check digit disagrees with the computed one."""

    def __init__(self, value: str, expected: str, supplied: str) -> None:
        """Initialize checksum mismatch error.

        Parameters
        ----------
        value : str
            The original input value.
        expected : str
            Check digit computed from the body digits.
        supplied : str
            Check digit found in the input.
        """
        super().__init__(f"{value!r}: invalid check digit {supplied!r}, should be {expected!r}")
        self.value = value
        self.expected = expected
        self.supplied = supplied


class UnknownSchemeError(IdentifierError):
    """Raised when an identifier scheme name is not registered."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        message = f"Unknown identifier scheme: {name!r}"
        if known:
            message += f". Valid schemes: {', '.join(known)}"
        super().__init__(message)
        self.name = name
