"""Error types raised while reporting deployment status."""

from __future__ import annotations


class GitOpsStatusError(Exception):
    """Base class for all status reporting errors."""


class ConfigLoadError(GitOpsStatusError):
    """A report, requirements or source config file could not be loaded."""


class ProviderResolutionError(GitOpsStatusError):
    """No git provider server or kind could be determined for an owner."""


class ProviderAPIError(GitOpsStatusError):
    """A call to the git provider failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404
