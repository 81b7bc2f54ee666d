"""Source config models: which git repositories live under which provider."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Repository:
    name: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Repository:
        return cls(name=(d or {}).get("name", "") or "")


@dataclass
class RepositoryGroup:
    owner: str = ""
    provider: str = ""
    provider_kind: str = ""
    repositories: list[Repository] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> RepositoryGroup:
        if not d:
            return cls()
        return cls(
            owner=d.get("owner", "") or "",
            provider=d.get("provider", "") or "",
            provider_kind=d.get("providerKind", "") or "",
            repositories=[Repository.from_dict(r) for r in d.get("repositories") or []],
        )


@dataclass
class SourceConfig:
    groups: list[RepositoryGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> SourceConfig:
        if not d:
            return cls()
        spec = d.get("spec") or {}
        return cls(groups=[RepositoryGroup.from_dict(g) for g in spec.get("groups") or []])
