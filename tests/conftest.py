"""Shared test fixtures — fake git runner, temp git repos."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest


def _key(args: List[str]) -> str:
    if args[0] == "diff":
        return "names" if "--name-only" in args else "diff"
    if args[0] == "rev-parse":
        return "hooks" if "--git-path" in args else args[-1].lstrip("-").replace("-", "_")
    return args[0]


class FakeRunner:
    """Stands in for run_git: canned output per command kind, calls recorded.

    Keys: ``tag``, ``names``, ``diff``, ``commit``, ``git_dir``, ``hooks``.
    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, **outputs: Union[str, Exception]) -> None:
        self.outputs: Dict[str, Union[str, Exception]] = outputs
        self.calls: List[List[str]] = []

    def __call__(self, args: List[str], cwd: Optional[Path] = None) -> str:
        self.calls.append(list(args))
        value = self.outputs.get(_key(args), "")
        if isinstance(value, Exception):
            raise value
        return value

    def kinds(self) -> List[str]:
        return [_key(call) for call in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner


def git(repo: Path, *args: str, env: Optional[Dict[str, str]] = None) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
        env={**os.environ, **(env or {})},
    )
    return result.stdout


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test")
    git(tmp_path, "config", "commit.gpgsign", "false")
    git(tmp_path, "config", "tag.gpgsign", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-m", "init")
    (tmp_path / ".git" / "hooks").mkdir(exist_ok=True)
    return tmp_path


@pytest.fixture
def tagged_repo(tmp_git_repo: Path) -> Path:
    """Repo with v1.0.0, v1.1.0, v1.2.0 and rc-1 tags at distinct creation dates."""
    for i, (name, content) in enumerate(
        [("v1.0.0", "one\n"), ("v1.1.0", "two\n"), ("rc-1", "rc\n"), ("v1.2.0", "three\n")]
    ):
        (tmp_git_repo / "VERSION").write_text(content)
        git(tmp_git_repo, "add", "VERSION")
        git(tmp_git_repo, "commit", "-m", f"release {name}")
        date = f"2024-01-0{i + 1}T12:00:00"
        git(tmp_git_repo, "tag", "-a", name, "-m", name, env={"GIT_COMMITTER_DATE": date})
    return tmp_git_repo
