"""Unit tests for the repoinit CLI commands."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from repoinit import __version__
from repoinit.exceptions import CommandFailedError
from repoinit.main import cli
from repoinit.runners import CommandResult
from repoinit.vcs import BootstrapOutcome, RepositoryHandle, VcsKind

_PATCH_DETECT = "repoinit.cli.commands.detect.existing_vcs_repo"
_PATCH_INIT = "repoinit.cli.commands.init.init_repository"
_PATCH_BOOTSTRAP = "repoinit.cli.commands.bootstrap.bootstrap_repository"

pytestmark = pytest.mark.usefixtures("clean_env")


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestDetect:
    def test_tracked_path_exits_zero(
        self,
        cli_runner: CliRunner,
        temp_dir: Path,
        make_git_repo: Callable[..., Path],
    ) -> None:
        root = make_git_repo(temp_dir / "ws")

        result = cli_runner.invoke(cli, ["detect", str(root)])

        assert result.exit_code == 0
        assert "is under version control" in result.output

    def test_untracked_path_exits_one(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        with patch(_PATCH_DETECT, return_value=False):
            result = cli_runner.invoke(
                cli, ["detect", str(temp_dir), "--cwd", str(temp_dir)]
            )

        assert result.exit_code == 1
        assert "is not under version control" in result.output

    def test_quiet_prints_nothing(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        with patch(_PATCH_DETECT, return_value=True):
            result = cli_runner.invoke(cli, ["-q", "detect", str(temp_dir)])

        assert result.exit_code == 0
        assert result.output == ""


class TestInit:
    def test_git_repository_is_created(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        target = temp_dir / "project"

        result = cli_runner.invoke(cli, ["init", str(target), "--vcs", "git"])

        assert result.exit_code == 0, result.output
        assert (target / ".git").is_dir()
        assert "Initialized empty git repository" in result.output

    def test_alias_is_parsed(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        with patch(
            _PATCH_INIT, return_value=RepositoryHandle(VcsKind.MERCURIAL)
        ) as init:
            result = cli_runner.invoke(
                cli, ["init", str(temp_dir / "p"), "--vcs", "hg"]
            )

        assert result.exit_code == 0
        assert init.call_args.args[0] is VcsKind.MERCURIAL

    def test_unknown_kind_is_a_usage_error(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["init", str(temp_dir), "--vcs", "cvs"])

        assert result.exit_code == 2
        assert "Unknown VCS kind" in result.output

    def test_missing_tool_reports_error(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        os.environ["REPOINIT_TOOLS__PIJUL"] = "repoinit-definitely-missing-pijul"

        result = cli_runner.invoke(
            cli, ["init", str(temp_dir / "p"), "--vcs", "pijul"]
        )

        assert result.exit_code == 1
        assert "Error: Command not found: repoinit-definitely-missing-pijul" in (
            result.output
        )
        assert "VCS: pijul" in result.output

    def test_tool_failure_shows_captured_output(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        failure = CommandFailedError(
            "`hg init p` exited with status 255",
            command=["hg", "init", "p"],
            result=CommandResult(255, "", "abort: repository p already exists!", 5),
        )
        with patch(_PATCH_INIT, side_effect=failure):
            result = cli_runner.invoke(
                cli, ["init", str(temp_dir / "p"), "--vcs", "hg"]
            )

        assert result.exit_code == 1
        assert "abort: repository p already exists!" in result.output


class TestBootstrap:
    def test_reports_initialized_repository(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        outcome = BootstrapOutcome(
            path=temp_dir / "p",
            kind=VcsKind.FOSSIL,
            handle=RepositoryHandle(VcsKind.FOSSIL),
        )
        with patch(_PATCH_BOOTSTRAP, return_value=outcome) as bootstrap:
            result = cli_runner.invoke(
                cli, ["bootstrap", str(temp_dir / "p"), "--vcs", "fossil"]
            )

        assert result.exit_code == 0
        assert "Initialized empty fossil repository" in result.output
        assert bootstrap.call_args.args[2] is VcsKind.FOSSIL

    def test_none_skips(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        target = temp_dir / "p"

        result = cli_runner.invoke(cli, ["bootstrap", str(target), "--vcs", "none"])

        assert result.exit_code == 0
        assert "version control disabled" in result.output
        assert not target.exists()

    def test_skips_inside_tracked_tree(
        self,
        cli_runner: CliRunner,
        temp_dir: Path,
        make_git_repo: Callable[..., Path],
    ) -> None:
        root = make_git_repo(temp_dir / "ws")

        result = cli_runner.invoke(cli, ["bootstrap", str(root / "new")])

        assert result.exit_code == 0
        assert "already inside a version-controlled tree" in result.output
        assert not (root / "new").exists()

    def test_tool_failure_names_the_vcs(
        self, cli_runner: CliRunner, temp_dir: Path
    ) -> None:
        os.environ["REPOINIT_TOOLS__PIJUL"] = "repoinit-definitely-missing-pijul"

        result = cli_runner.invoke(
            cli, ["bootstrap", str(temp_dir / "p"), "--vcs", "pijul"]
        )

        assert result.exit_code == 1
        assert "Error: Command not found" in result.output
        assert "VCS: pijul" in result.output


def test_invalid_config_exits_with_error(
    cli_runner: CliRunner, temp_dir: Path
) -> None:
    bad = temp_dir / "bad.yaml"
    bad.write_text("default_vcs: cvs\n")

    result = cli_runner.invoke(cli, ["--config", str(bad), "detect", str(temp_dir)])

    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output
    assert "Field: default_vcs" in result.output
