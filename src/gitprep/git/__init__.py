"""Git interface layer — subprocess adapter, argument builder, tags, Command."""

from gitprep.git.adapter import GitError, get_repo_root, run_git
from gitprep.git.command import Command, NoStagedChangesError
from gitprep.git.models import Amend, DiffMode, Staged, TagPair, TagRange
from gitprep.git.tags import latest_two_tags, parse_tag_pair, resolve_tag_pair

__all__ = [
    "Amend",
    "Command",
    "DiffMode",
    "GitError",
    "NoStagedChangesError",
    "Staged",
    "TagPair",
    "TagRange",
    "get_repo_root",
    "latest_two_tags",
    "parse_tag_pair",
    "resolve_tag_pair",
    "run_git",
]
