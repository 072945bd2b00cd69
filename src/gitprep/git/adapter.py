"""Git subprocess wrapper — every git call goes through run_git."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, List, Optional

Runner = Callable[[List[str], Optional[Path]], str]


class GitError(Exception):
    """Raised when git is unavailable or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        args: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.git_args = list(args or [])
        self.returncode = returncode
        self.stderr = stderr


def run_git(args: List[str], cwd: Optional[Path] = None, timeout: Optional[int] = None) -> str:
    """Run a git command and return raw stdout. Raises GitError on failure.

    Output is returned untouched (trailing newline included); callers
    decide how to trim it.
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH", args=args)
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}", args=args)

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(
            f"git {' '.join(args)} exited with status {result.returncode}: {stderr}",
            args=args,
            returncode=result.returncode,
            stderr=stderr,
        )
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())
