from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from git import Repo

if TYPE_CHECKING:
    from click.testing import CliRunner


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for the test environment.

    Runs for every test so log output goes to stderr at WARNING level and
    never mixes with captured stdout.
    """
    from repoinit.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also restores the current working directory, so tests that call
    os.chdir() do not affect other tests.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()
    os.chdir(original_cwd)


@pytest.fixture
def clean_env(tmp_path: Path) -> Generator[None, None, None]:
    """Remove REPOINIT_ variables and point HOME at an empty directory."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("REPOINIT_"):
            del os.environ[key]
    home = tmp_path / "home"
    home.mkdir()
    os.environ["HOME"] = str(home)
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def make_git_repo() -> Callable[..., Path]:
    """Factory creating a git repository with an optional .gitignore.

    Example:
        >>> def test_ignored(make_git_repo, temp_dir):
        ...     root = make_git_repo(temp_dir / "ws", gitignore="target/\\n")
    """

    def _make(path: Path, gitignore: str | None = None) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        Repo.init(path).close()
        if gitignore is not None:
            (path / ".gitignore").write_text(gitignore)
        return path

    return _make


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def corrupt_executable(temp_dir: Path) -> Path:
    """Executable file the kernel refuses to load (ENOEXEC on spawn)."""
    binary = temp_dir / "bin" / "corrupt-tool"
    binary.parent.mkdir()
    binary.write_bytes(b"\x00\x01\x02 not a program \xff\xfe")
    binary.chmod(0o755)
    return binary
