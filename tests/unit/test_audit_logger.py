"""Tests for the check run event log."""

import json
import re
from pathlib import Path

import pytest

from pubident.audit import generate_run_id, get_iso_timestamp
from pubident.audit.helpers import get_package_version
from pubident.audit.logger import AuditLogger


@pytest.fixture
def logger(tmp_path: Path) -> AuditLogger:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="run-1", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_identifier_rejected_event(logger: AuditLogger) -> None:
    """Test a rejection is a WARN line referencing its input."""
    logger.identifier_rejected("ISSN 0378-5950", "invalid", scheme="issn", rid="line:3")

    (event,) = _read_events(logger.log_path)

    assert event["event"] == "identifier_rejected"
    assert event["level"] == "WARN"
    assert event["run_id"] == "run-1"
    assert event["rid"] == "line:3"
    assert event["data"] == {
        "value": "ISSN 0378-5950",
        "reason_code": "invalid",
        "scheme": "issn",
    }
    assert event["ts"].endswith("Z")


@pytest.mark.unit
def test_identifier_rejected_message(logger: AuditLogger) -> None:
    """Test the error detail of a checksum mismatch is kept."""
    logger.identifier_rejected(
        "036000291459",
        "checksum_mismatch",
        scheme="upc",
        rid="line:4",
        message="'036000291459': invalid check digit '9', should be '2'",
    )

    (event,) = _read_events(logger.log_path)

    assert event["data"]["message"].endswith("should be '2'")


@pytest.mark.unit
def test_rejections_are_tallied_by_reason(logger: AuditLogger) -> None:
    """Test the logger counts what it logs."""
    logger.identifier_rejected("nothing", "not_a_candidate")
    logger.identifier_rejected("ISSN 0378-5950", "invalid")
    logger.identifier_rejected("hello", "not_a_candidate")

    assert logger.rejections == {"not_a_candidate": 2, "invalid": 1}


# ---------------------------------------------------------------------------
# Run lifecycle
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_run_started_records_command_and_parameters(logger: AuditLogger) -> None:
    """Test the configuration of the run is logged."""
    logger.run_started(["pubident", "check", "ids.txt"], {"validate": True, "schemes": None})

    (event,) = _read_events(logger.log_path)

    assert event["event"] == "run_started"
    assert event["data"]["command"] == ["pubident", "check", "ids.txt"]
    assert event["data"]["parameters"] == {"validate": True, "schemes": None}
    assert event["rid"] is None


@pytest.mark.unit
def test_run_finished_reports_tallies(logger: AuditLogger) -> None:
    """Test run_finished carries counts, rejections by reason and duration."""
    logger.identifier_rejected("nothing", "not_a_candidate")
    logger.identifier_rejected("036000291459", "checksum_mismatch")
    logger.run_finished("success", values_checked=8)

    finished = _read_events(logger.log_path)[-1]

    assert finished["event"] == "run_finished"
    assert finished["data"]["status"] == "success"
    assert finished["data"]["values_checked"] == 8
    assert finished["data"]["values_rejected"] == 2
    assert finished["data"]["rejections"] == {"checksum_mismatch": 1, "not_a_candidate": 1}
    assert finished["data"]["duration_seconds"] >= 0


@pytest.mark.unit
def test_run_finished_without_rejections(logger: AuditLogger) -> None:
    """Test a clean run reports zero rejections and no unknown count."""
    logger.run_finished("success")

    (finished,) = _read_events(logger.log_path)

    assert finished["data"]["values_rejected"] == 0
    assert finished["data"]["rejections"] == {}
    assert "values_checked" not in finished["data"]


@pytest.mark.unit
def test_error_event(logger: AuditLogger) -> None:
    """Test an exception is logged by class name and message."""
    logger.error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), rid="line:2")

    (event,) = _read_events(logger.log_path)

    assert event["level"] == "ERROR"
    assert event["rid"] == "line:2"
    assert event["data"]["exception_class"] == "UnicodeDecodeError"
    assert "invalid start byte" in event["data"]["message"]


# ---------------------------------------------------------------------------
# File handling
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_runs_append_to_same_file(tmp_path: Path) -> None:
    """Test consecutive runs share a log, told apart by run id."""
    log_path = tmp_path / "logs" / "events.jsonl"

    with AuditLogger(run_id="r1", log_path=log_path) as lg:
        lg.run_finished("success")

    with AuditLogger(run_id="r2", log_path=log_path) as lg2:
        lg2.identifier_rejected("nothing", "not_a_candidate")
        lg2.run_finished("failed")
        lg2.close()

    events = _read_events(log_path)
    assert [(e["run_id"], e["event"]) for e in events] == [
        ("r1", "run_finished"),
        ("r2", "identifier_rejected"),
        ("r2", "run_finished"),
    ]
    # Tallies belong to one run.
    assert events[-1]["data"]["values_rejected"] == 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_generate_run_id_format() -> None:
    """Test run IDs are timestamp plus random suffix and unique."""
    run_id = generate_run_id()

    assert re.fullmatch(r".+Z__[0-9a-f]{8}", run_id)
    assert generate_run_id() != run_id


@pytest.mark.unit
def test_get_iso_timestamp_is_utc() -> None:
    """Test timestamps are UTC with a 'Z' suffix."""
    ts = get_iso_timestamp()

    assert ts.endswith("Z")
    assert "+00:00" not in ts


@pytest.mark.unit
def test_get_package_version_returns_string() -> None:
    """Test version lookup never raises."""
    assert isinstance(get_package_version(), str)
