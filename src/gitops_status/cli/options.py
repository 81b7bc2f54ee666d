"""Shared CLI options."""

from __future__ import annotations

from pathlib import Path

import typer

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
DirOption = typer.Option(Path("."), "--dir", "-d", help="The directory that contains the GitOps content")
DeployOffsetOption = typer.Option(
    "2h",
    "--deploy-offset",
    help="Only releases deployed within this offset of now have their deployments updated. "
    "Set to empty to update all. Format is a Go duration string, e.g. 2h or 90m",
)
