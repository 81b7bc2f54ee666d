"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

GITHUB_URL = "https://github.com"


def _default_git_token() -> str:
    """Return the git token from the environment.

    Checks GIT_TOKEN first, then GITHUB_TOKEN which most CI runners export.
    """
    return os.environ.get("GIT_TOKEN", "") or os.environ.get("GITHUB_TOKEN", "")


def _default_http_timeout() -> float:
    raw = os.environ.get("GITOPS_STATUS_HTTP_TIMEOUT", "")
    if raw:
        try:
            return float(raw)
        except ValueError:
            pass
    return 30.0


@dataclass
class Settings:
    git_token: str = field(default_factory=_default_git_token)
    http_timeout: float = field(default_factory=_default_http_timeout)
    default_git_server: str = GITHUB_URL
    release_report_path: Path = Path("docs") / "releases.yaml"
    requirements_files: tuple[str, ...] = ("jx-requirements.yml", "jx-requirements.yaml")
    source_config_path: Path = Path(".jx") / "gitops" / "source-config.yaml"

    def release_report_file(self, directory: Path) -> Path:
        return directory / self.release_report_path

    def source_config_file(self, directory: Path) -> Path:
        return directory / self.source_config_path


@dataclass
class StatusOptions:
    """Options for a single status reporting run."""

    dir: Path = Path(".")
    fail_on_error: bool = False
    auto_inactive: bool = True
    deploy_offset: str = "2h"
    git_token: str = ""


# Global singleton
settings = Settings()
