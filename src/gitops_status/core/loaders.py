"""Load the release report, requirements and source config from a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

import yaml

from gitops_status.config.settings import settings
from gitops_status.core.errors import ConfigLoadError
from gitops_status.models.release import NamespaceReleases
from gitops_status.models.requirements import Requirements
from gitops_status.models.source_config import SourceConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"failed to load {path}: {e}") from e


def _parse(path: Path, what: str, parse: Callable[[Any], T], data: Any) -> T:
    # Models read mappings with .get, so a scalar or list in the wrong place fails here
    try:
        return parse(data)
    except (AttributeError, TypeError) as e:
        raise ConfigLoadError(f"failed to load {what} from {path}: unexpected structure: {e}") from e


def load_release_report(path: Path) -> list[NamespaceReleases]:
    data = _load_yaml(path)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigLoadError(f"failed to load {path}: expected a list of namespace releases")
    return _parse(path, "release report", lambda items: [NamespaceReleases.from_dict(d) for d in items], data)


def find_requirements_file(directory: Path) -> Path | None:
    """Look for a requirements file in the directory and then its parents."""
    for d in (directory, *directory.resolve().parents):
        for name in settings.requirements_files:
            candidate = d / name
            if candidate.is_file():
                return candidate
    return None


def load_requirements(directory: Path) -> Requirements:
    path = find_requirements_file(directory)
    if path is None:
        raise ConfigLoadError(f"failed to load requirements in dir {directory}: no jx-requirements.yml found")
    data = _load_yaml(path)
    if data is not None and not isinstance(data, dict):
        raise ConfigLoadError(f"failed to load requirements from {path}: expected a mapping")
    return _parse(path, "requirements", Requirements.from_dict, data or {})


def load_source_config(directory: Path) -> SourceConfig:
    """Load the source config, returning an empty config if the file is missing."""
    path = settings.source_config_file(directory)
    if not path.exists():
        logger.debug("no source config at %s", path)
        return SourceConfig()
    data = _load_yaml(path)
    if data is not None and not isinstance(data, dict):
        raise ConfigLoadError(f"failed to load source config from {path}: expected a mapping")
    return _parse(path, "source config", SourceConfig.from_dict, data or {})
