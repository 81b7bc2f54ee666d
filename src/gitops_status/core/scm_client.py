"""Git provider clients.

Every provider gets a ``ScmClient``. Only providers whose API supports
deployments get a ``DeploymentClient``, so callers check the capability
with ``isinstance`` before using it.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Iterator

import requests

from gitops_status.config.settings import GITHUB_URL, settings
from gitops_status.core.errors import ProviderAPIError, ProviderResolutionError
from gitops_status.models import GitKind
from gitops_status.models.deployment import (
    Deployment,
    DeploymentInput,
    DeploymentStatus,
    DeploymentStatusInput,
)
from gitops_status.utils.git_url import split_repo

logger = logging.getLogger(__name__)

_PAGE_SIZE = 100


class ScmClient:
    """A client for one git server."""

    def __init__(self, kind: str, server: str, token: str = ""):
        self.kind = kind
        self.server = server.rstrip("/")
        self.token = token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, server={self.server!r})"


class DeploymentClient(ScmClient, abc.ABC):
    """A client whose provider supports deployments and deployment statuses."""

    @abc.abstractmethod
    def list_deployments(self, repo: str) -> Iterator[Deployment]:
        """Yield the repository's deployments, fetching further pages only as needed."""

    @abc.abstractmethod
    def create_deployment(self, repo: str, deployment: DeploymentInput) -> Deployment:
        ...

    @abc.abstractmethod
    def create_deployment_status(
        self, repo: str, deployment_id: str, status: DeploymentStatusInput,
    ) -> DeploymentStatus:
        ...


class GitHubClient(DeploymentClient):
    """GitHub and GitHub Enterprise REST client."""

    def __init__(
        self,
        server: str = GITHUB_URL,
        token: str = "",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        super().__init__(GitKind.GITHUB.value, server or GITHUB_URL, token)
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._session = session

    @property
    def api_url(self) -> str:
        if self.server in ("https://github.com", "http://github.com"):
            return "https://api.github.com"
        return f"{self.server}/api/v3"

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update({
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            })
            if self.token:
                session.headers["Authorization"] = f"Bearer {self.token}"
            self._session = session
        return self._session

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.api_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise ProviderAPIError(f"{method} {url} failed: {e}", status_code=status_code) from e
        except ValueError as e:
            # includes requests.JSONDecodeError, e.g. an HTML page from a proxy or SSO redirect
            raise ProviderAPIError(f"{method} {url} returned invalid JSON: {e}", status_code=resp.status_code) from e
        except requests.RequestException as e:
            raise ProviderAPIError(f"{method} {url} failed: {e}") from e

    def list_deployments(self, repo: str) -> Iterator[Deployment]:
        page = 1
        while True:
            chunk = self._request(
                "GET",
                f"/repos/{repo}/deployments",
                params={"per_page": _PAGE_SIZE, "page": page},
            )
            if not chunk:
                break
            for d in chunk:
                yield _convert_deployment(repo, d)
            if len(chunk) < _PAGE_SIZE:
                break
            page += 1

    def create_deployment(self, repo: str, deployment: DeploymentInput) -> Deployment:
        body: dict[str, Any] = {
            "ref": deployment.ref,
            "task": deployment.task,
            "environment": deployment.environment,
            "description": deployment.description,
            "auto_merge": deployment.auto_merge,
            "transient_environment": deployment.transient_environment,
            "production_environment": deployment.production_environment,
        }
        if deployment.required_contexts is not None:
            body["required_contexts"] = deployment.required_contexts
        data = self._request("POST", f"/repos/{repo}/deployments", json=body)
        return _convert_deployment(repo, data)

    def create_deployment_status(
        self, repo: str, deployment_id: str, status: DeploymentStatusInput,
    ) -> DeploymentStatus:
        body = {
            "state": status.state,
            "description": status.description,
            "environment": status.environment,
            "environment_url": status.environment_link,
            "target_url": status.target_link,
            "log_url": status.log_link,
            "auto_inactive": status.auto_inactive,
        }
        data = self._request("POST", f"/repos/{repo}/deployments/{deployment_id}/statuses", json=body)
        return DeploymentStatus(
            id=str(data.get("id", "")),
            state=data.get("state", ""),
            description=data.get("description", "") or "",
            environment=data.get("environment", "") or "",
            environment_link=data.get("environment_url", "") or "",
            target_link=data.get("target_url", "") or "",
            log_link=data.get("log_url", "") or "",
            auto_inactive=status.auto_inactive,
        )


def _convert_deployment(repo: str, d: dict) -> Deployment:
    # GitHub deployments belong to a repository, so they are named after it
    _, name = split_repo(repo)
    return Deployment(
        id=str(d.get("id", "")),
        ref=d.get("ref", "") or "",
        name=name,
        environment=d.get("environment", "") or "",
        link=d.get("url", "") or "",
        task=d.get("task", "") or "",
        description=d.get("description", "") or "",
        production_environment=bool(d.get("production_environment", False)),
    )


def new_scm_client(kind: str, server: str, token: str = "") -> ScmClient:
    """Create a client for the given provider kind and server."""
    git_kind = GitKind.from_str(kind)
    if git_kind is None:
        raise ProviderResolutionError(f"unsupported git kind {kind!r} for server {server}")
    if git_kind == GitKind.GITHUB:
        return GitHubClient(server=server, token=token)
    logger.debug("git kind %s has no deployment support, using a basic client for %s", kind, server)
    return ScmClient(kind, server, token)
