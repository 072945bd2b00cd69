"""Argument vectors for every git invocation — pure, no I/O."""

from __future__ import annotations

from typing import List, Optional

from gitprep.config.schema import GitConfig
from gitprep.git.models import Amend, DiffMode, Staged, TagPair, TagRange

EXCLUDE_PATHSPEC = ":(exclude,top)"


def select_mode(config: GitConfig, pair: Optional[TagPair]) -> DiffMode:
    """Pick the diff mode. A tag prefix without a usable pair falls through."""
    if config.diff_tag_prefix and pair is not None:
        return TagRange(pair.newer, pair.older)
    if config.is_amend:
        return Amend()
    return Staged()


def range_args(mode: DiffMode) -> List[str]:
    if isinstance(mode, TagRange):
        return [mode.tag1, mode.tag2]
    if isinstance(mode, Amend):
        return ["HEAD^", "HEAD"]
    return ["--staged"]


def exclude_pathspecs(config: GitConfig) -> List[str]:
    """Return one top-anchored exclude pathspec per configured pattern."""
    return [EXCLUDE_PATHSPEC + pattern for pattern in config.exclude_list]


def diff_names_args(config: GitConfig, mode: DiffMode) -> List[str]:
    return ["diff", "--name-only", *range_args(mode), *exclude_pathspecs(config)]


def diff_files_args(config: GitConfig, mode: DiffMode) -> List[str]:
    return [
        "diff",
        "--ignore-all-space",
        "--diff-algorithm=minimal",
        f"--unified={config.diff_unified}",
        *range_args(mode),
        *exclude_pathspecs(config),
    ]


def commit_args(message: str, amend: bool = False) -> List[str]:
    args = ["commit", "--no-verify", "--signoff", f"--message={message}"]
    if amend:
        args.append("--amend")
    return args


def git_dir_args() -> List[str]:
    return ["rev-parse", "--git-dir"]


def hook_path_args() -> List[str]:
    return ["rev-parse", "--git-path", "hooks"]


def tag_list_args() -> List[str]:
    return ["tag", "--sort=-creatordate"]
