"""Command — pick a diff mode, run git, and manage the commit hook."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from gitprep.config.options import Option, build_config
from gitprep.git import args as gitargs
from gitprep.git.adapter import GitError, Runner, run_git
from gitprep.git.models import DiffMode
from gitprep.git.tags import resolve_tag_pair
from gitprep.hooks import installer
from gitprep.hooks.templates import HOOK_PREPARE_COMMIT_MESSAGE, render_template


class NoStagedChangesError(GitError):
    """Raised when the name listing comes back empty."""


class Command:
    """Git operations for one immutable configuration.

    Usage::

        cmd = Command(with_diff_unified(5), with_enable_amend(True))
        text = cmd.diff_files()
    """

    def __init__(self, *options: Option, cwd: Optional[Path] = None, runner: Runner = run_git) -> None:
        self.config = build_config(options)
        self.cwd = cwd
        self._run = runner

    def is_diff_tag(self) -> Tuple[bool, str, str]:
        """Report whether tag mode was requested, plus the resolved pair.

        The flag is True whenever a prefix is configured, even if no usable
        pair was found; both tags are then empty strings.
        """
        if not self.config.diff_tag_prefix:
            return False, "", ""
        pair = resolve_tag_pair(self.config.diff_tag_prefix, self._run, self.cwd)
        if pair is None:
            return True, "", ""
        return True, pair.newer, pair.older

    def diff_mode(self) -> DiffMode:
        pair = None
        if self.config.diff_tag_prefix:
            pair = resolve_tag_pair(self.config.diff_tag_prefix, self._run, self.cwd)
        return gitargs.select_mode(self.config, pair)

    def diff_names(self) -> List[str]:
        """Return the file names the diff would cover."""
        output = self._run(gitargs.diff_names_args(self.config, self.diff_mode()), self.cwd)
        return [line for line in output.splitlines() if line.strip()]

    def diff_files(self) -> str:
        """Return the diff text for the selected mode.

        Raises NoStagedChangesError when git lists no files. The check is
        against the raw output, so a lone newline does not count as empty.
        """
        mode = self.diff_mode()
        output = self._run(gitargs.diff_names_args(self.config, mode), self.cwd)
        if output == "":
            raise NoStagedChangesError("please add your staged changes using git add <files...>")

        return self._run(gitargs.diff_files_args(self.config, mode), self.cwd)

    def commit(self, message: str) -> str:
        return self._run(gitargs.commit_args(message, self.config.is_amend), self.cwd)

    def git_dir(self) -> str:
        """Return git's raw ``rev-parse --git-dir`` output."""
        return self._run(gitargs.git_dir_args(), self.cwd)

    def hooks_dir(self) -> Path:
        output = self._run(gitargs.hook_path_args(), self.cwd)
        return (self.cwd or Path.cwd()) / output.strip()

    def install_hook(self) -> Path:
        hooks_dir = self.hooks_dir()
        installer.ensure_absent(hooks_dir)
        content = render_template(
            HOOK_PREPARE_COMMIT_MESSAGE, {"command": self.config.hook_command}
        )
        return installer.install_hook(hooks_dir, content)

    def uninstall_hook(self) -> Path:
        return installer.uninstall_hook(self.hooks_dir())
