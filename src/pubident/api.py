"""Public API for normalizing and checking identifier strings.

This module provides the main public API for pubident, enabling:
- Normalizing a single value, with or without a known scheme
- Checking batches of values or whole files of values
- Exporting results to JSONL format
"""

from __future__ import annotations

import json
import sys
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from pubident.audit import AuditLogger, generate_run_id
from pubident.audit.helpers import get_package_version
from pubident.config import CheckConfig, IdentifierResult
from pubident.errors import ChecksumMismatchError
from pubident.identifiers import (
    PublicationIdentifier,
    create,
    get_scheme,
    split,
    to_upc,
)

__all__ = [
    "check_file",
    "check_values",
    "normalize_value",
    "write_jsonl",
]


def normalize_value(
    text: str,
    scheme: str | None = None,
    *,
    validate: bool = False,
) -> str | None:
    """Normalize one identifier string.

    Parameters
    ----------
    text : str
        Raw identifier, labelled ("issn:0378-5955") or not.
    scheme : str | None, optional
        Scheme name. If given, that scheme's normalizer is applied as-is
        (which may repair a wrong check character). If None, the scheme
        is resolved from the value and only a valid reading is returned.
    validate : bool, optional
        Raise on a wrong UPC check digit instead of repairing it.

    Returns
    -------
    str | None
        Normalized value, or None.

    Raises
    ------
    ChecksumMismatchError
        If ``validate`` is True and the value is a UPC with a wrong check digit.
    UnknownSchemeError
        If ``scheme`` is not registered.

    Examples
    --------
        >>> normalize_value("ISSN: 0378-5955")
        '03785955'
        >>> normalize_value("OCLC:1234", scheme="oclc")
        '00001234'
    """
    if scheme is not None:
        selected = get_scheme(scheme)
        if selected.name == "upc":
            return to_upc(text, log=False, validate=validate)
        return selected.normalize(text, log=False)

    identifier = _identify(text, None, validate)
    if identifier is None or not identifier.valid:
        return None
    return identifier.value


def check_values(
    values: Iterable[str],
    config: CheckConfig | None = None,
    audit_logger: AuditLogger | None = None,
) -> list[IdentifierResult]:
    """Check every identifier found in ``values``.

    Each value may hold several identifiers (see ``identifiers.split``);
    one result is produced per candidate string.

    Parameters
    ----------
    values : Iterable[str]
        Raw field values.
    config : CheckConfig | None, optional
        Check configuration, by default ``CheckConfig()``.
    audit_logger : AuditLogger | None, optional
        Receives an ``identifier_rejected`` event per rejected value.

    Returns
    -------
    list[IdentifierResult]
    """
    refs = ((f"value:{index}", value) for index, value in enumerate(values, start=1))
    return _check(refs, config or CheckConfig(), audit_logger)


def check_file(
    path: str | Path,
    config: CheckConfig | None = None,
    *,
    command: list[str] | None = None,
) -> list[IdentifierResult]:
    """Check every identifier in a text file, one or more per line.

    If ``config.events_path`` is set, a run is logged there as
    ``run_started``, ``identifier_rejected`` events and ``run_finished``.

    Parameters
    ----------
    path : str | Path
        UTF-8 text file.
    config : CheckConfig | None, optional
        Check configuration, by default ``CheckConfig()``.
    command : list[str] | None, optional
        Command line recorded in the ``run_started`` event.

    Returns
    -------
    list[IdentifierResult]

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    config = config or CheckConfig()
    with file_path.open(encoding="utf-8") as f:
        lines = f.read().splitlines()
    refs = ((f"line:{number}", line) for number, line in enumerate(lines, start=1))

    if config.events_path is None:
        return _check(refs, config, None)

    counters: Counter[str] = Counter()
    with AuditLogger(generate_run_id(), config.events_path) as audit_logger:
        audit_logger.run_started(
            command=command if command is not None else sys.argv,
            parameters={
                "input": file_path.name,
                "package_version": get_package_version(),
                **config.to_dict(),
            },
        )
        try:
            results = _check(refs, config, audit_logger, counters)
        except Exception as e:
            audit_logger.error(e)
            audit_logger.run_finished("failed", values_checked=counters["checked"])
            raise
        audit_logger.run_finished("success", values_checked=counters["checked"])
    return results


def write_jsonl(
    results: Iterable[IdentifierResult],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> None:
    """Write results to JSONL file (one JSON object per line).

    Parameters
    ----------
    results : Iterable[IdentifierResult]
        Results to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.
    """
    file_path = Path(path)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for result in results:
            json_str = json.dumps(
                result.to_dict(),
                ensure_ascii=False,
                sort_keys=sort_keys,
            )
            f.write(json_str + "\n")


def _check(
    refs: Iterable[tuple[str, str]],
    config: CheckConfig,
    audit_logger: AuditLogger | None,
    counters: Counter[str] | None = None,
) -> list[IdentifierResult]:
    results: list[IdentifierResult] = []
    for rid, value in refs:
        for part in split(value):
            result = _check_one(part, rid, config)
            if counters is not None:
                counters["checked"] += 1
            if not result.valid:
                if audit_logger is not None:
                    audit_logger.identifier_rejected(
                        part,
                        _reason_code(result),
                        scheme=result.scheme,
                        rid=rid,
                        message=result.error,
                    )
                if not config.include_rejected:
                    continue
            results.append(result)
    return results


def _check_one(text: str, rid: str, config: CheckConfig) -> IdentifierResult:
    try:
        identifier = _identify(text, config.schemes, config.validate)
    except ChecksumMismatchError as e:
        return IdentifierResult(
            input=text,
            scheme="upc",
            normalized=None,
            candidate=True,
            valid=False,
            error=str(e),
            rid=rid,
        )

    if identifier is None:
        return IdentifierResult(
            input=text, scheme=None, normalized=None, candidate=False, valid=False, rid=rid
        )
    return IdentifierResult(
        input=text,
        scheme=identifier.scheme,
        normalized=identifier.value if identifier.valid else None,
        candidate=True,
        valid=identifier.valid,
        rid=rid,
    )


def _identify(
    text: str,
    schemes: list[str] | None,
    validate: bool,
) -> PublicationIdentifier | None:
    """Resolve ``text`` against ``schemes`` (all schemes if None)."""
    identifier = create(text, schemes=schemes)
    upc_candidate = (schemes is None or "upc" in schemes) and get_scheme("upc").is_candidate(text)

    if validate and upc_candidate and (identifier is None or not identifier.valid):
        to_upc(text, log=False, validate=True)
    return identifier


def _reason_code(result: IdentifierResult) -> str:
    if result.error is not None:
        return "checksum_mismatch"
    if not result.candidate:
        return "not_a_candidate"
    return "invalid"
