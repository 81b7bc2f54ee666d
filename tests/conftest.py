import shutil
from datetime import datetime, timezone
from pathlib import Path

import pytest

from gitops_status.core.errors import ProviderAPIError
from gitops_status.core.scm_client import DeploymentClient, ScmClient
from gitops_status.core.scm_registry import ScmClientRegistry
from gitops_status.models.deployment import Deployment, DeploymentStatus

TESTDATA = Path(__file__).parent / "testdata"

FAKE_SERVER = "https://fake.com"
NOW = datetime(2023, 1, 25, 10, 38, 47, tzinfo=timezone.utc)


class FakeDeploymentClient(DeploymentClient):
    """In-memory provider that records deployments and statuses like a real server."""

    def __init__(self, server: str = FAKE_SERVER):
        super().__init__("github", server)
        self.deployments: dict[str, list[Deployment]] = {}
        self.statuses: dict[str, list[DeploymentStatus]] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()

    def _maybe_fail(self, call: str) -> None:
        self.calls.append(call)
        if call in self.fail_on:
            raise ProviderAPIError(f"{call} failed", status_code=500)

    def list_deployments(self, repo):
        self._maybe_fail("list")
        if "list-404" in self.fail_on:
            raise ProviderAPIError("not found", status_code=404)
        return list(self.deployments.get(repo, []))

    def create_deployment(self, repo, deployment):
        self._maybe_fail("create")
        existing = self.deployments.setdefault(repo, [])
        created = Deployment(
            id=f"deployment-{len(existing) + 1}",
            ref=deployment.ref,
            name=repo.rsplit("/", 1)[-1],
            environment=deployment.environment,
            link=f"{self.server}/{repo}/deployments/{len(existing) + 1}",
            task=deployment.task,
            description=deployment.description,
            production_environment=deployment.production_environment,
        )
        existing.append(created)
        return created

    def create_deployment_status(self, repo, deployment_id, status):
        self._maybe_fail("status")
        key = f"{repo}/{deployment_id}"
        existing = self.statuses.setdefault(key, [])
        created = DeploymentStatus(
            id=f"status-{len(existing) + 1}",
            state=status.state,
            description=status.description,
            environment=status.environment,
            environment_link=status.environment_link,
            target_link=status.target_link,
            log_link=status.log_link,
            auto_inactive=status.auto_inactive,
        )
        existing.append(created)
        # Track the most recently reported version on the deployment
        for d in self.deployments.get(repo, []):
            if d.id == deployment_id:
                d.ref = "v" + status.description.removeprefix("Deployment ")
        return created


@pytest.fixture
def fake_client():
    return FakeDeploymentClient()


@pytest.fixture
def basic_client():
    return ScmClient("gitlab", FAKE_SERVER)


@pytest.fixture
def registry(fake_client):
    reg = ScmClientRegistry(token="faketoken")
    reg.register(FAKE_SERVER, fake_client)
    return reg


@pytest.fixture
def gitops_dir(tmp_path):
    """A writable copy of the sample GitOps repository."""
    target = tmp_path / "gitops"
    shutil.copytree(TESTDATA / "gitops", target)
    return target
