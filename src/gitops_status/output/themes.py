"""Outcome color maps."""

from gitops_status.models.result import ReconcileOutcome

OUTCOME_COLORS: dict[ReconcileOutcome, str] = {
    ReconcileOutcome.CREATED: "green bold",
    ReconcileOutcome.UPDATED: "green",
    ReconcileOutcome.UNCHANGED: "dim",
    ReconcileOutcome.SKIPPED_NO_VERSION: "yellow",
    ReconcileOutcome.SKIPPED_OUTSIDE_WINDOW: "dim",
    ReconcileOutcome.SKIPPED_UNSUPPORTED: "yellow",
    ReconcileOutcome.FAILED: "red bold",
}


def styled_outcome(outcome: ReconcileOutcome) -> str:
    color = OUTCOME_COLORS.get(outcome, "white")
    return f"[{color}]{outcome.value}[/{color}]"


def styled_flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"
