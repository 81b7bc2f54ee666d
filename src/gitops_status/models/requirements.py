"""Cluster requirements models (the parts used for status reporting)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ClusterConfig:
    git_server: str = ""
    git_kind: str = ""
    environment_git_owner: str = ""
    cluster_name: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ClusterConfig:
        if not d:
            return cls()
        return cls(
            git_server=d.get("gitServer", "") or "",
            git_kind=d.get("gitKind", "") or "",
            environment_git_owner=d.get("environmentGitOwner", "") or "",
            cluster_name=d.get("clusterName", "") or "",
        )


@dataclass
class EnvironmentConfig:
    key: str = ""
    namespace: str = ""
    owner: str = ""
    repository: str = ""
    git_url: str = ""

    @property
    def effective_namespace(self) -> str:
        if self.namespace:
            return self.namespace
        if self.key == "dev":
            return "jx"
        return "jx-" + self.key

    @classmethod
    def from_dict(cls, d: dict) -> EnvironmentConfig:
        if not d:
            return cls()
        return cls(
            key=d.get("key", "") or "",
            namespace=d.get("namespace", "") or "",
            owner=d.get("owner", "") or "",
            repository=d.get("repository", "") or "",
            git_url=d.get("gitUrl", "") or "",
        )


@dataclass
class Requirements:
    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    environments: list[EnvironmentConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> Requirements:
        """Build from either the full ``{apiVersion, kind, spec}`` document or a bare spec."""
        if not d:
            return cls()
        spec = d.get("spec") if "spec" in d else d
        spec = spec or {}
        return cls(
            cluster=ClusterConfig.from_dict(spec.get("cluster") or {}),
            environments=[EnvironmentConfig.from_dict(e) for e in spec.get("environments") or []],
        )
