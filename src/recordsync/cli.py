from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from recordsync.config import merge_payload, records_config, records_defaults
from recordsync.exceptions import HostContractError
from recordsync.records.fixes import analyze_document, analyze_type, apply_fix, fix_all
from recordsync.records.model import Finding, FixAction, RecordsConfig, Severity, Verdict
from recordsync.schema import CheckResponse, FindingDTO, FixResponse
from recordsync.syntax.codec import decode_text, encode
from recordsync.syntax.nodes import Node
from recordsync.syntax.rewrite import find_type_at

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")


def _load_settings(
    root: Path,
    config: Optional[Path],
    modifier_name: Optional[str],
    constructor_filter: Optional[str],
) -> RecordsConfig:
    defaults = records_defaults(root=root, config_path=config)
    payload = {
        "modifier_name": modifier_name,
        "constructor_filter": constructor_filter,
    }
    return records_config(merge_payload(payload, defaults))


def _read_document(path: Path) -> Node:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise HostContractError("cannot read tree document", path=path, detail=exc) from exc
    return decode_text(text)


def _finding_dto(finding: Finding) -> FindingDTO:
    return FindingDTO(
        type_name=finding.type_name,
        verdict=finding.verdict.value,
        diagnostic_id=finding.diagnostic_id,
        severity=finding.severity.value if finding.severity else None,
        span_start=finding.span.start,
        span_end=finding.span.end,
        fixes=[action.value for action in finding.fixes],
    )


def _emit(model: CheckResponse | FixResponse) -> None:
    typer.echo(json.dumps(model.model_dump(), indent=2, sort_keys=True))


@app.command("check")
def check(
    path: Path = typer.Argument(..., help="JSON-encoded syntax tree document."),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
    modifier_name: Optional[str] = typer.Option(None, "--modifier-name"),
    constructor_filter: Optional[str] = typer.Option(None, "--constructor-filter"),
    fail_on_findings: bool = typer.Option(
        False, "--fail-on-findings/--no-fail-on-findings"
    ),
    fail_on: Severity = typer.Option(
        Severity.WARNING,
        "--fail-on",
        help="Lowest finding severity that fails the run with --fail-on-findings.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Report record types whose constructor or modifier is missing or stale."""
    _configure_logging(verbose)
    settings = _load_settings(root, config, modifier_name, constructor_filter)
    try:
        document = _read_document(path)
        findings = analyze_document(document, settings)
    except HostContractError as exc:
        _emit(CheckResponse(path=str(path), findings=[], errors=[exc.reason]))
        raise typer.Exit(code=2)
    _emit(CheckResponse(path=str(path), findings=[_finding_dto(f) for f in findings]))
    if fail_on_findings and any(
        finding.severity is not None and finding.severity.at_least(fail_on)
        for finding in findings
    ):
        raise typer.Exit(code=1)


@app.command("fix")
def fix(
    path: Path = typer.Argument(..., help="JSON-encoded syntax tree document."),
    position: Optional[int] = typer.Option(
        None, "--position", help="Offset inside the type to fix; every finding when omitted."
    ),
    constructor_only: bool = typer.Option(False, "--constructor-only"),
    out: Optional[Path] = typer.Option(None, "--out"),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
    modifier_name: Optional[str] = typer.Option(None, "--modifier-name"),
    constructor_filter: Optional[str] = typer.Option(None, "--constructor-filter"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Regenerate record constructors (and modifier methods) in a tree document."""
    _configure_logging(verbose)
    settings = _load_settings(root, config, modifier_name, constructor_filter)
    action = FixAction.CONSTRUCTOR if constructor_only else FixAction.CONSTRUCTOR_AND_MODIFIER
    try:
        document = _read_document(path)
        if position is None:
            updated, applied = fix_all(document, action, settings)
        else:
            declaration = find_type_at(document, position)
            if declaration is None:
                raise HostContractError(
                    "no type declaration encloses the position", position=position
                )
            finding = analyze_type(declaration, settings)
            applied = [finding] if finding.verdict is not Verdict.NO_FINDING else []
            updated = document
            for item in applied:
                updated = apply_fix(updated, item, action, settings)
    except HostContractError as exc:
        _emit(FixResponse(document={}, errors=[exc.reason]))
        raise typer.Exit(code=2)
    payload = encode(updated)
    if out is not None:
        out.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        logger.info("Wrote %s", out)
    _emit(FixResponse(document=payload, applied=[_finding_dto(f) for f in applied]))


def main() -> None:
    app()
