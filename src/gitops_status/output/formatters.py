"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from gitops_status.models.result import ReconcileResult, StatusReport

console = Console()


def _result_to_dict(r: ReconcileResult) -> dict[str, Any]:
    return {
        "repository": r.repository,
        "environment": r.environment,
        "ref": r.ref,
        "outcome": r.outcome.value,
        "message": r.message,
        "deployment_id": r.deployment_id,
        "status_id": r.status_id,
    }


def _report_to_dict(report: StatusReport) -> dict[str, Any]:
    return {
        "results": [_result_to_dict(r) for r in report.results],
        "warnings": report.warnings,
        "counts": {k.value: v for k, v in report.counts.items()},
        "changed": report.changed_count,
    }


def output_status_report(report: StatusReport, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_report_to_dict(report), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_report_to_dict(report), default_flow_style=False))
    else:
        from gitops_status.output.tables import status_report_table
        if not report.results:
            console.print("[dim]No releases to report.[/dim]")
            return
        console.print(status_report_table(report))
        summary = ", ".join(f"{count} {outcome.value}" for outcome, count in report.counts.items())
        console.print(f"\nStatus reporting complete: {summary} ({report.changed_count} changed)")
        if report.warnings:
            console.print(f"[yellow]{len(report.warnings)} warning(s)[/yellow]")


def output_release_report(rows: list[dict[str, Any]], fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(rows, indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(rows, default_flow_style=False))
    else:
        from gitops_status.output.tables import release_report_table
        console.print(release_report_table(rows))
