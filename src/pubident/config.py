"""Batch check configuration and result dataclasses."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from pubident.identifiers import get_scheme, scheme_names

__all__ = ["CheckConfig", "IdentifierResult"]


@dataclass
class CheckConfig:
    """Configuration for checking a batch of identifier strings.

    Attributes
    ----------
    schemes : list[str] | None
        Scheme names to try. If None, all registered schemes are tried and
        each value is resolved as in ``identifiers.create``.
    validate : bool
        Treat a wrong UPC check digit as an error instead of repairing it.
    include_rejected : bool
        Keep results for values that are not valid identifiers.
    events_path : Path | None
        JSONL audit event log. If None, no events are written.
    """

    schemes: list[str] | None = None
    validate: bool = False
    include_rejected: bool = True
    events_path: Path | None = None

    def __post_init__(self) -> None:
        """Normalize scheme names and validate."""
        if self.schemes is not None:
            if not self.schemes:
                raise ValueError("schemes must not be empty; use None for all schemes")
            self.schemes = [get_scheme(name).name for name in self.schemes]

        if self.events_path is not None:
            self.events_path = Path(self.events_path)

    @property
    def effective_schemes(self) -> list[str]:
        """Scheme names in resolution order."""
        if self.schemes is None:
            return scheme_names()
        return [name for name in scheme_names() if name in self.schemes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["events_path"] = str(self.events_path) if self.events_path is not None else None
        return data


@dataclass
class IdentifierResult:
    """Outcome of checking one candidate string.

    Attributes
    ----------
    input : str
        The candidate string as found in the input.
    scheme : str | None
        Scheme the value was resolved to, if any scheme accepted it.
    normalized : str | None
        Normalized value when valid.
    candidate : bool
        Whether any scheme considered the value a candidate.
    valid : bool
        Whether the value is a valid identifier of ``scheme``.
    error : str | None
        Error message (e.g. check digit mismatch in validate mode).
    rid : str | None
        Input reference such as "line:3".
    """

    input: str
    scheme: str | None
    normalized: str | None
    candidate: bool
    valid: bool
    error: str | None = None
    rid: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
