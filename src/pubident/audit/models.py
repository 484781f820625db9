"""Data models for audit logging."""

from dataclasses import dataclass, field
from typing import Any

__all__ = ["LogEvent"]


@dataclass
class LogEvent:
    """One line of the check run event log.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Run identifier.
    level : str
        "INFO", "WARN" or "ERROR".
    event : str
        "run_started", "identifier_rejected", "error" or "run_finished".
    data : dict[str, Any]
        Event-specific payload.
    rid : str | None
        Input reference (e.g. "line:12") when the event concerns one value.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    rid: str | None = None
