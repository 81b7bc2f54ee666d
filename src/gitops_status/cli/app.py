"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="gitops-status",
    help="GitOps Status - Report Helm release deployments to your git provider.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _register_commands() -> None:
    from gitops_status.cli.commands.status_cmd import app as status_app
    from gitops_status.cli.commands.releases_cmd import app as releases_app

    app.add_typer(status_app, name="status", help="Update the git deployment status after a release")
    app.add_typer(releases_app, name="releases", help="Show the release report")


_register_commands()


def main() -> None:
    app()
