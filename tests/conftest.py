"""Shared fixtures: isolated environment and a fake git clone."""

import os
from pathlib import Path
from typing import List, Tuple

os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Run every test from an empty directory with no gitplace settings."""
    monkeypatch.delenv("GITPLACE_BASE_PATH", raising=False)
    monkeypatch.delenv("GITPLACE_LOG_LEVEL", raising=False)
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def clone_calls(monkeypatch) -> List[Tuple[str, Path]]:
    """Replace git.Repo.clone_from with a recorder that creates the checkout dir."""
    calls = []

    def fake_clone_from(url, to_path, *args, **kwargs):
        calls.append((url, Path(to_path)))
        Path(to_path).mkdir()
        (Path(to_path) / ".git").mkdir()

    monkeypatch.setattr(git.Repo, "clone_from", fake_clone_from)
    return calls


@pytest.fixture
def forbid_clone(monkeypatch):
    """Fail the test if anything tries to run git."""
    def fail_clone_from(*args, **kwargs):
        pytest.fail("git clone must not be invoked")

    monkeypatch.setattr(git.Repo, "clone_from", fail_clone_from)


@pytest.fixture
def failing_clone(monkeypatch):
    """Make git.Repo.clone_from fail like git does for a missing repository."""
    def fake_clone_from(url, to_path, *args, **kwargs):
        raise git.exc.GitCommandError(
            ["git", "clone", url, str(to_path)],
            128,
            stderr=f"fatal: repository {url} not found",
        )

    monkeypatch.setattr(git.Repo, "clone_from", fake_clone_from)
