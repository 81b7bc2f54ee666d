"""Decide and apply deployment and deployment status changes for a release."""

from __future__ import annotations

import logging
from datetime import datetime

from gitops_status.core.errors import ProviderAPIError
from gitops_status.core.repo_matcher import resolve_repository
from gitops_status.core.scm_client import DeploymentClient
from gitops_status.core.scm_registry import ScmClientRegistry
from gitops_status.models import Environment
from gitops_status.models.deployment import Deployment, DeploymentInput, DeploymentStatusInput
from gitops_status.models.release import Release
from gitops_status.models.result import ReconcileOutcome, ReconcileResult
from gitops_status.utils.git_url import join_repo, split_repo

logger = logging.getLogger(__name__)


def in_deploy_window(release: Release, cutoff: datetime | None) -> bool:
    """True if there is no cutoff or the release was deployed after it."""
    if cutoff is None:
        return True
    return release.last_deployed is not None and release.last_deployed > cutoff


class DeploymentReconciler:
    """Brings the provider deployment for a (repository, environment) in line with a release.

    Each call leaves the deployment untouched when its ref already matches,
    adds one status to it when the ref differs, or creates the deployment
    plus one status when none exists. Provider failures raise
    ``ProviderAPIError``; the caller decides whether they abort the run.
    """

    def __init__(
        self,
        registry: ScmClientRegistry,
        auto_inactive: bool = True,
        deploy_cutoff: datetime | None = None,
    ):
        self.registry = registry
        self.auto_inactive = auto_inactive
        self.deploy_cutoff = deploy_cutoff

    def reconcile(
        self,
        env: Environment,
        provider: str,
        kind: str,
        owner: str,
        repo_name: str,
        release: Release,
    ) -> ReconcileResult:
        full_name = join_repo(owner, repo_name)

        if not release.version:
            logger.warning("missing version for release %s in environment %s", repo_name, env.name)
            return ReconcileResult(
                repository=full_name,
                environment=env.name,
                outcome=ReconcileOutcome.SKIPPED_NO_VERSION,
                message="release has no version",
            )

        if not in_deploy_window(release, self.deploy_cutoff):
            logger.debug("release %s in environment %s was not deployed after %s", repo_name, env.name, self.deploy_cutoff)
            return ReconcileResult(
                repository=full_name,
                environment=env.name,
                outcome=ReconcileOutcome.SKIPPED_OUTSIDE_WINDOW,
                message="release not deployed within the deploy window",
            )

        full_name = resolve_repository(full_name, release.sources, provider, owner)
        ref = "v" + release.version

        client = self.registry.get_or_create(owner, provider, kind)
        if not isinstance(client, DeploymentClient):
            logger.warning(
                "cannot update deployment status of release %s as the git server %s does not support deployments",
                full_name, provider,
            )
            return ReconcileResult(
                repository=full_name,
                environment=env.name,
                outcome=ReconcileOutcome.SKIPPED_UNSUPPORTED,
                ref=ref,
                message=f"git server {provider} does not support deployments",
            )

        deployment = self.find_existing_deployment(client, full_name, env.name)
        if deployment is None:
            deployment = self.create_deployment(client, full_name, ref, env.name)
            outcome = ReconcileOutcome.CREATED
        elif deployment.ref == ref:
            logger.info("existing deployment for %s is the same version as release (%s). Skipping deployment", full_name, ref)
            return ReconcileResult(
                repository=full_name,
                environment=env.name,
                outcome=ReconcileOutcome.UNCHANGED,
                ref=ref,
                message="deployment already at this version",
                deployment_id=deployment.id,
            )
        else:
            outcome = ReconcileOutcome.UPDATED

        status_input = DeploymentStatusInput(
            state="success",
            description=f"Deployment {release.version.removeprefix('v')}",
            environment=env.name,
            environment_link=env.url,
            target_link=release.application_url,
            log_link=release.logs_url,
            auto_inactive=self.auto_inactive,
        )
        try:
            status = client.create_deployment_status(full_name, deployment.id, status_input)
        except ProviderAPIError as e:
            raise ProviderAPIError(
                f"failed to create deployment status for repository {full_name} and ref {ref}: {e}",
                status_code=e.status_code,
            ) from e
        logger.info(
            "created deployment status for repository %s ref %s at %s with logs URL %s and target URL %s",
            full_name, ref, status.id, release.logs_url, release.application_url,
        )
        return ReconcileResult(
            repository=full_name,
            environment=env.name,
            outcome=outcome,
            ref=ref,
            message=status_input.description,
            deployment_id=deployment.id,
            status_id=status.id,
        )

    def find_existing_deployment(
        self, client: DeploymentClient, full_name: str, environment: str,
    ) -> Deployment | None:
        """Return the first deployment of the repository in the environment, if any."""
        _, name = split_repo(full_name)
        # Listing is lazy, so stopping at the first match skips the remaining pages
        try:
            for d in client.list_deployments(full_name):
                if d.name == name and d.environment == environment:
                    logger.info("found existing deployment %s", d.link or d.id)
                    return d
        except ProviderAPIError as e:
            if not e.not_found:
                raise ProviderAPIError(
                    f"failed to list deployments for repository {full_name}: {e}",
                    status_code=e.status_code,
                ) from e
        return None

    def create_deployment(
        self, client: DeploymentClient, full_name: str, ref: str, environment: str,
    ) -> Deployment:
        _, name = split_repo(full_name)
        deployment_input = DeploymentInput(
            ref=ref,
            task="deploy",
            environment=environment,
            description=f"release {name} for version {ref.removeprefix('v')}",
            production_environment="prod" in environment.lower(),
        )
        try:
            deployment = client.create_deployment(full_name, deployment_input)
        except ProviderAPIError as e:
            raise ProviderAPIError(
                f"failed to create deployment for repository {full_name} and ref {ref}: {e}",
                status_code=e.status_code,
            ) from e
        logger.info("created deployment for release %s at %s", full_name, deployment.link or deployment.id)
        return deployment
