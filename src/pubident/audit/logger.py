"""JSONL event log of a batch identifier check.

Several runs may share one file; every line carries its run id. The file
is opened for append and flushed after each event, so an interrupted run
still leaves its rejections on disk.
"""

import json
import time
from collections import Counter
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pubident.audit.models import LogEvent
from pubident.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Event log for one check run.

    The logger keeps the run's tallies itself: rejections are counted by
    reason code as they are logged, and the run is timed from the moment
    the logger is created. :meth:`run_finished` reports both.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    rejections : Counter[str]
        Rejected values so far, by reason code.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.rejections: Counter[str] = Counter()
        self._started = time.perf_counter()

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file; safe to call twice."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log the command line and check configuration of this run."""
        self._emit("run_started", {"command": command, "parameters": parameters})

    def identifier_rejected(
        self,
        value: str,
        reason_code: str,
        scheme: str | None = None,
        rid: str | None = None,
        message: str | None = None,
    ) -> None:
        """Log a candidate string that is not a valid identifier.

        Parameters
        ----------
        value : str
            The candidate string as found in the input.
        reason_code : str
            "not_a_candidate", "invalid" or "checksum_mismatch".
        scheme : str | None, optional
            Scheme the value was read as, if any.
        rid : str | None, optional
            Input reference (e.g. "line:3").
        message : str | None, optional
            Error detail, e.g. the expected check digit.
        """
        self.rejections[reason_code] += 1

        data: dict[str, Any] = {"value": value, "reason_code": reason_code}
        if scheme is not None:
            data["scheme"] = scheme
        if message is not None:
            data["message"] = message
        self._emit("identifier_rejected", data, level="WARN", rid=rid)

    def error(self, exc: BaseException, rid: str | None = None) -> None:
        """Log an exception that aborted the run (or one value, with ``rid``)."""
        self._emit(
            "error",
            {"exception_class": type(exc).__name__, "message": str(exc)},
            level="ERROR",
            rid=rid,
        )

    def run_finished(self, status: str, values_checked: int | None = None) -> None:
        """Log the outcome, duration and rejection tallies of this run.

        Parameters
        ----------
        status : str
            "success" or "failed".
        values_checked : int | None, optional
            Number of candidate strings examined, if known.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": time.perf_counter() - self._started,
            "values_rejected": sum(self.rejections.values()),
            "rejections": dict(sorted(self.rejections.items())),
        }
        if values_checked is not None:
            data["values_checked"] = values_checked
        self._emit("run_finished", data)

    def _emit(
        self,
        event: str,
        data: dict[str, Any],
        level: str = "INFO",
        rid: str | None = None,
    ) -> None:
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event,
            data=data,
            rid=rid,
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()
