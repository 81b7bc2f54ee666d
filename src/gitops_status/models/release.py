"""Release report models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def parse_timestamp(raw: object) -> datetime | None:
    """Parse a report timestamp into an aware datetime.

    PyYAML already turns unquoted ISO timestamps into datetimes; quoted ones
    arrive as strings. Naive values are taken as UTC.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        dt = raw
    else:
        try:
            dt = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
        except ValueError:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass
class Release:
    name: str = ""
    version: str = ""
    chart: str = ""
    last_deployed: datetime | None = None
    first_deployed: datetime | None = None
    sources: list[str] = field(default_factory=list)
    application_url: str = ""
    logs_url: str = ""
    repository_name: str = ""
    repository_url: str = ""

    @property
    def last_deployed_short(self) -> str:
        if self.last_deployed is None:
            return ""
        return self.last_deployed.strftime("%Y-%m-%d %H:%M:%S")

    @classmethod
    def from_dict(cls, d: dict) -> Release:
        if not d:
            return cls()
        version = d.get("version", "")
        return cls(
            name=d.get("name", "") or "",
            version="" if version is None else str(version),
            chart=d.get("chart", "") or "",
            last_deployed=parse_timestamp(d.get("lastDeployed")),
            first_deployed=parse_timestamp(d.get("firstDeployed")),
            sources=[str(s) for s in d.get("sources") or []],
            application_url=d.get("application") or d.get("applicationURL") or "",
            logs_url=d.get("logs") or d.get("logsURL") or "",
            repository_name=d.get("repositoryName", "") or "",
            repository_url=d.get("repositoryUrl", "") or "",
        )


@dataclass
class NamespaceReleases:
    namespace: str = ""
    path: str = ""
    releases: list[Release] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> NamespaceReleases:
        if not d:
            return cls()
        return cls(
            namespace=d.get("namespace", "") or "",
            path=d.get("path", "") or "",
            releases=[Release.from_dict(r) for r in d.get("releases") or []],
        )
