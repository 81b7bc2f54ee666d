"""Reconciliation result models."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field


class ReconcileOutcome(enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED_NO_VERSION = "skipped-no-version"
    SKIPPED_OUTSIDE_WINDOW = "skipped-outside-window"
    SKIPPED_UNSUPPORTED = "skipped-unsupported"
    FAILED = "failed"

    @property
    def changed(self) -> bool:
        return self in (ReconcileOutcome.CREATED, ReconcileOutcome.UPDATED)


@dataclass
class ReconcileResult:
    repository: str
    environment: str
    outcome: ReconcileOutcome
    ref: str = ""
    message: str = ""
    deployment_id: str = ""
    status_id: str = ""


@dataclass
class StatusReport:
    results: list[ReconcileResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(self, result: ReconcileResult) -> None:
        self.results.append(result)

    @property
    def counts(self) -> dict[ReconcileOutcome, int]:
        return dict(Counter(r.outcome for r in self.results))

    @property
    def changed_count(self) -> int:
        """Number of results that wrote a deployment or status to the provider."""
        return sum(1 for r in self.results if r.outcome.changed)

    @property
    def has_failures(self) -> bool:
        return any(r.outcome == ReconcileOutcome.FAILED for r in self.results)
