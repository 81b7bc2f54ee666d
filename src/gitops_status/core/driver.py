"""Walk the release report and reconcile each repository/environment pair."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from gitops_status.config.settings import StatusOptions, settings
from gitops_status.core.environment_resolver import EnvironmentResolver
from gitops_status.core.errors import ConfigLoadError, GitOpsStatusError, ProviderAPIError, ProviderResolutionError
from gitops_status.core.loaders import load_release_report, load_requirements, load_source_config
from gitops_status.core.reconciler import DeploymentReconciler
from gitops_status.core.scm_registry import ScmClientRegistry
from gitops_status.models.release import NamespaceReleases, Release
from gitops_status.models.result import ReconcileOutcome, ReconcileResult, StatusReport
from gitops_status.models.source_config import RepositoryGroup
from gitops_status.utils.duration import parse_duration
from gitops_status.utils.git_url import join_repo, saas_git_kind

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def deploy_cutoff(offset: str, now: datetime) -> datetime | None:
    """Return the time releases must be deployed after, or None when the offset is empty."""
    if not offset:
        return None
    try:
        delta = parse_duration(offset)
    except ValueError as e:
        raise ConfigLoadError(f"failed to parse time offset {offset}: {e}") from e
    return now - abs(delta)


def default_group(group: RepositoryGroup) -> None:
    if not group.provider:
        group.provider = settings.default_git_server
    if not group.provider_kind:
        group.provider_kind = saas_git_kind(group.provider)


class StatusDriver:
    """Runs a status reporting pass over a GitOps directory.

    Repositories are processed one at a time. A failing pair is logged and
    skipped unless ``fail_on_error`` is set, in which case the run stops.
    """

    def __init__(
        self,
        options: StatusOptions,
        registry: ScmClientRegistry | None = None,
        clock: Clock = _utcnow,
    ):
        self.options = options
        self.registry = registry or ScmClientRegistry(token=options.git_token or settings.git_token)
        self.clock = clock
        self.namespace_releases: list[NamespaceReleases] = []
        self.environments = EnvironmentResolver()

    def run(self) -> StatusReport:
        report = StatusReport()
        directory = self.options.dir
        path = settings.release_report_file(directory)
        if not path.exists():
            logger.info("no report at file %s so cannot report deployment status", path)
            return report

        self.namespace_releases = load_release_report(path)
        requirements = load_requirements(directory)
        self.environments = EnvironmentResolver.from_requirements(requirements)
        source_config = load_source_config(directory)

        reconciler = DeploymentReconciler(
            self.registry,
            auto_inactive=self.options.auto_inactive,
            deploy_cutoff=deploy_cutoff(self.options.deploy_offset, self.clock()),
        )

        if not source_config.groups:
            logger.warning(
                "no source config found in dir %s. Will assume all repos are in the current organisation as gitops repo",
                directory,
            )
            cluster = requirements.cluster
            group = RepositoryGroup(
                owner=cluster.environment_git_owner,
                provider=cluster.git_server or settings.default_git_server,
                provider_kind=cluster.git_kind,
            )
            for nsr in self.namespace_releases:
                for release in nsr.releases:
                    self._reconcile(reconciler, report, group, release.name, nsr.namespace, release)
            return report

        for group in source_config.groups:
            default_group(group)
            for repo in group.repositories:
                for namespace, release in self.releases_named(repo.name):
                    self._reconcile(reconciler, report, group, repo.name, namespace, release)
        return report

    def releases_named(self, name: str) -> list[tuple[str, Release]]:
        return [
            (nsr.namespace, release)
            for nsr in self.namespace_releases
            for release in nsr.releases
            if release.name == name
        ]

    def _reconcile(
        self,
        reconciler: DeploymentReconciler,
        report: StatusReport,
        group: RepositoryGroup,
        repo_name: str,
        namespace: str,
        release: Release,
    ) -> None:
        env = self.environments.lookup(namespace)
        full_name = join_repo(group.owner, repo_name)
        try:
            result = reconciler.reconcile(
                env, group.provider, group.provider_kind, group.owner, repo_name, release,
            )
        except (ProviderResolutionError, ProviderAPIError) as e:
            if self.options.fail_on_error:
                raise GitOpsStatusError(f"failed to update status for repository {full_name}: {e}") from e
            message = f"failed to update status for repository {full_name} : {e}"
            logger.warning(message)
            report.warnings.append(message)
            result = ReconcileResult(
                repository=full_name,
                environment=env.name,
                outcome=ReconcileOutcome.FAILED,
                message=str(e),
            )
        report.add(result)
