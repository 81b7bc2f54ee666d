"""Provider-side deployment models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Deployment:
    id: str = ""
    ref: str = ""
    name: str = ""
    environment: str = ""
    link: str = ""
    task: str = ""
    description: str = ""
    production_environment: bool = False


@dataclass
class DeploymentInput:
    ref: str
    environment: str
    task: str = "deploy"
    description: str = ""
    production_environment: bool = False
    transient_environment: bool = False
    auto_merge: bool = False
    required_contexts: list[str] | None = None


@dataclass
class DeploymentStatus:
    id: str = ""
    state: str = ""
    description: str = ""
    environment: str = ""
    environment_link: str = ""
    target_link: str = ""
    log_link: str = ""
    auto_inactive: bool = False


@dataclass
class DeploymentStatusInput:
    state: str
    description: str = ""
    environment: str = ""
    environment_link: str = ""
    target_link: str = ""
    log_link: str = ""
    auto_inactive: bool = False
