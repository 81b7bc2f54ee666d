from typer.testing import CliRunner

from gitops_status.cli.app import app
from gitops_status.cli.commands import status_cmd
from gitops_status.core.driver import StatusDriver
from gitops_status.models.deployment import Deployment

runner = CliRunner()


def test_status_without_report(tmp_path):
    result = runner.invoke(app, ["status", "--dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "No releases to report" in result.output


def test_status_reports_results(gitops_dir, registry, fake_client, monkeypatch):
    monkeypatch.setattr(status_cmd, "StatusDriver", lambda options: StatusDriver(options, registry=registry))

    result = runner.invoke(app, ["status", "--dir", str(gitops_dir), "--deploy-offset", "", "-o", "yaml"])

    assert result.exit_code == 0, result.output
    assert "outcome: created" in result.output
    assert "changed: 2" in result.output
    assert len(fake_client.deployments["fakeOwner/fakeRepo"]) == 2


def test_status_table_summary_counts_changes(gitops_dir, registry, fake_client, monkeypatch):
    monkeypatch.setattr(status_cmd, "StatusDriver", lambda options: StatusDriver(options, registry=registry))
    fake_client.deployments["fakeOwner/fakeRepo"] = [
        Deployment(id="deployment-1", ref="v0.0.2", name="fakeRepo", environment="Production", task="deploy"),
    ]

    result = runner.invoke(app, ["status", "--dir", str(gitops_dir), "--deploy-offset", ""])

    assert result.exit_code == 0, result.output
    assert "Status reporting complete:" in result.output
    assert "1 unchanged" in result.output
    assert "1 created" in result.output
    assert "(1 changed)" in result.output


def test_status_malformed_source_config(gitops_dir):
    (gitops_dir / ".jx" / "gitops" / "source-config.yaml").write_text(
        "spec:\n  groups:\n  - just-a-string\n", encoding="utf-8",
    )
    result = runner.invoke(app, ["status", "--dir", str(gitops_dir)])
    assert result.exit_code == 1
    assert "failed to load source config" in result.output


def test_status_fatal_config_error(gitops_dir):
    (gitops_dir / "jx-requirements.yml").unlink()
    result = runner.invoke(app, ["status", "--dir", str(gitops_dir)])
    assert result.exit_code == 1
    assert "failed to load requirements" in result.output


def test_releases_lists_report(gitops_dir):
    result = runner.invoke(app, ["releases", "--dir", str(gitops_dir), "--deploy-offset", "", "-o", "yaml"])
    assert result.exit_code == 0, result.output
    assert "name: old-service" in result.output
    assert "environment: Production" in result.output
    assert "in_window: true" in result.output


def test_releases_without_report(tmp_path):
    result = runner.invoke(app, ["releases", "--dir", str(tmp_path)])
    assert result.exit_code == 1
