"""Configuration schema — the frozen GitConfig and the draft it is built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

# yarn.lock, Cargo.lock, Gemfile.lock, Pipfile.lock and friends fall under *.lock
EXCLUDE_FROM_DIFF: Tuple[str, ...] = (
    "package-lock.json",
    "pnpm-lock.yaml",
    "*.lock",
    "go.sum",
)

DEFAULT_DIFF_UNIFIED = 3
DEFAULT_HOOK_COMMAND = "codegpt commit --preview --file"


@dataclass
class _Draft:
    """Mutable configuration that options write into before it is frozen."""

    diff_unified: int = DEFAULT_DIFF_UNIFIED
    exclude_list: List[str] = field(default_factory=list)
    is_amend: bool = False
    diff_tag_prefix: str = ""
    diff_list: List[str] = field(default_factory=list)
    commit_id: str = ""
    hook_command: str = DEFAULT_HOOK_COMMAND


@dataclass(frozen=True)
class GitConfig:
    diff_unified: int = DEFAULT_DIFF_UNIFIED
    exclude_list: Tuple[str, ...] = EXCLUDE_FROM_DIFF
    is_amend: bool = False
    diff_tag_prefix: str = ""  # empty = not tag mode
    diff_list: Tuple[str, ...] = ()  # reserved
    commit_id: str = ""
    hook_command: str = DEFAULT_HOOK_COMMAND

    @classmethod
    def from_draft(cls, draft: _Draft) -> "GitConfig":
        """Freeze *draft*; caller exclusions are appended to the built-in ones."""
        return cls(
            diff_unified=draft.diff_unified,
            exclude_list=EXCLUDE_FROM_DIFF + tuple(draft.exclude_list),
            is_amend=draft.is_amend,
            diff_tag_prefix=draft.diff_tag_prefix,
            diff_list=tuple(draft.diff_list),
            commit_id=draft.commit_id,
            hook_command=draft.hook_command,
        )
