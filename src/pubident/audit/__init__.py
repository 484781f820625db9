"""Audit logging for pubident batch runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: Run identifier factory
"""

from pubident.audit.helpers import generate_run_id
from pubident.audit.logger import AuditLogger
from pubident.audit.models import LogEvent
from pubident.utils import get_iso_timestamp

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_iso_timestamp",
]
