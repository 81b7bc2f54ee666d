"""Rich table builders for each command."""

from __future__ import annotations

from rich.table import Table

from gitops_status.models.result import StatusReport
from gitops_status.output.themes import styled_flag, styled_outcome


def status_report_table(report: StatusReport) -> Table:
    table = Table(title="Deployment Status", expand=True)
    table.add_column("Repository", style="bold white", no_wrap=True)
    table.add_column("Environment", style="blue", no_wrap=True)
    table.add_column("Ref", style="magenta")
    table.add_column("Outcome", no_wrap=True)
    table.add_column("Deployment", style="dim")
    table.add_column("Message", max_width=60)

    for r in report.results:
        table.add_row(
            r.repository,
            r.environment,
            r.ref or "-",
            styled_outcome(r.outcome),
            r.deployment_id or "-",
            r.message,
        )
    return table


def release_report_table(rows: list[dict]) -> Table:
    table = Table(title="Reported Releases", expand=True)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Environment", style="cyan", no_wrap=True)
    table.add_column("Release", style="bold white", no_wrap=True)
    table.add_column("Version", style="magenta")
    table.add_column("Last Deployed", style="dim", no_wrap=True)
    table.add_column("In Window", no_wrap=True)
    table.add_column("Sources", style="dim", max_width=50)

    for row in rows:
        table.add_row(
            row["namespace"],
            row["environment"],
            row["name"],
            row["version"] or "-",
            row["last_deployed"] or "-",
            styled_flag(row["in_window"]),
            ", ".join(row["sources"]),
        )
    return table
