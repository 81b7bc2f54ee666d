"""gitops-status releases - Show the release report."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import typer
from rich.console import Console

from gitops_status.cli.options import DeployOffsetOption, DirOption, OutputOption
from gitops_status.config.settings import settings
from gitops_status.core.driver import deploy_cutoff
from gitops_status.core.environment_resolver import EnvironmentResolver
from gitops_status.core.errors import GitOpsStatusError
from gitops_status.core.loaders import load_release_report, load_requirements
from gitops_status.core.reconciler import in_deploy_window
from gitops_status.models.release import NamespaceReleases
from gitops_status.output.formatters import output_release_report

app = typer.Typer()
err_console = Console(stderr=True)


def release_rows(
    namespace_releases: list[NamespaceReleases],
    environments: EnvironmentResolver,
    cutoff: datetime | None,
) -> list[dict]:
    rows = []
    for nsr in namespace_releases:
        env = environments.lookup(nsr.namespace)
        for r in nsr.releases:
            rows.append({
                "namespace": nsr.namespace,
                "environment": env.name,
                "name": r.name,
                "version": r.version,
                "last_deployed": r.last_deployed_short,
                "in_window": in_deploy_window(r, cutoff),
                "sources": r.sources,
            })
    return rows


@app.callback(invoke_without_command=True)
def releases(
    dir: Path = DirOption,
    deploy_offset: str = DeployOffsetOption,
    output: str = OutputOption,
) -> None:
    """List reported releases and whether they fall inside the deploy window."""
    path = settings.release_report_file(dir)
    if not path.exists():
        typer.echo(f"No release report at {path}.", err=True)
        raise typer.Exit(code=1)

    try:
        namespace_releases = load_release_report(path)
        environments = EnvironmentResolver.from_requirements(load_requirements(dir))
        cutoff = deploy_cutoff(deploy_offset, datetime.now(timezone.utc))
    except GitOpsStatusError as e:
        err_console.print(f"[red]error:[/red] {e}")
        raise typer.Exit(code=1)

    output_release_report(release_rows(namespace_releases, environments, cutoff), output)
