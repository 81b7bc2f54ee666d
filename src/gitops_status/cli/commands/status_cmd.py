"""gitops-status status - Update the git deployment status after a release."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gitops_status.cli.options import DeployOffsetOption, DirOption, OutputOption
from gitops_status.config.settings import StatusOptions, settings
from gitops_status.core.driver import StatusDriver
from gitops_status.core.errors import GitOpsStatusError
from gitops_status.output.formatters import output_status_report

app = typer.Typer()
err_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def status(
    dir: Path = DirOption,
    fail: bool = typer.Option(
        False, "--fail", "-f", help="Fail the pipeline if the deployment status cannot be reported",
    ),
    auto_inactive: bool = typer.Option(
        True, "--auto-inactive/--no-auto-inactive", "-a",
        help="Mark the statuses of previous deployments as inactive",
    ),
    deploy_offset: str = DeployOffsetOption,
    git_token: str = typer.Option("", "--git-token", help="Git token, defaults to $GIT_TOKEN or $GITHUB_TOKEN"),
    output: str = OutputOption,
) -> None:
    """Update the git deployment status of each repository after a release."""
    options = StatusOptions(
        dir=dir,
        fail_on_error=fail,
        auto_inactive=auto_inactive,
        deploy_offset=deploy_offset,
        git_token=git_token or settings.git_token,
    )
    try:
        report = StatusDriver(options).run()
    except GitOpsStatusError as e:
        err_console.print(f"[red]error:[/red] {e}")
        raise typer.Exit(code=1)

    output_status_report(report, output)
