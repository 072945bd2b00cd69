"""Resolve the two most recent tags sharing a prefix.

Tags are listed once with ``git tag --sort=-creatordate``; filtering,
truncation, and joining happen here rather than in a shell pipeline, so
the prefix is never interpolated into a command string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitprep.git.adapter import GitError, Runner, run_git
from gitprep.git.args import tag_list_args
from gitprep.git.models import TagPair


def latest_two_tags(prefix: str, run: Runner = run_git, cwd: Optional[Path] = None) -> str:
    """Return up to two newest tags starting with *prefix*, space separated."""
    output = run(tag_list_args(), cwd)
    matches = [name for name in output.splitlines() if name.startswith(prefix)]
    return " ".join(matches[:2])


def parse_tag_pair(output: str) -> Optional[TagPair]:
    """Parse ``"<newer> <older>"``. Anything but two non-empty tokens is no pair."""
    tokens = output.split(" ")
    if len(tokens) != 2 or not all(tokens):
        return None
    return TagPair(newer=tokens[0], older=tokens[1])


def resolve_tag_pair(prefix: str, run: Runner = run_git, cwd: Optional[Path] = None) -> Optional[TagPair]:
    """Return the newest tag pair for *prefix*, or None.

    A failing tag listing degrades to None: the caller diffs as if no tag
    prefix had been configured.
    """
    try:
        output = latest_two_tags(prefix, run, cwd)
    except GitError:
        return None
    return parse_tag_pair(output)
