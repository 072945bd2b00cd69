"""Functional options for building a GitConfig.

Each option mutates one field of a draft. Options are applied in the
order given, so a later option wins over an earlier one on the same
field. Values are not validated; git rejects bad ones at run time.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from gitprep.config.schema import GitConfig, _Draft

Option = Callable[[_Draft], None]


def with_diff_unified(val: int) -> Option:
    """Generate diffs with *val* lines of context instead of the usual three."""

    def apply(draft: _Draft) -> None:
        draft.diff_unified = val

    return apply


def with_exclude_list(val: Sequence[str]) -> Option:
    """Add exclusion patterns. An empty list leaves the draft untouched."""

    def apply(draft: _Draft) -> None:
        if not val:
            return
        draft.exclude_list = list(val)

    return apply


def with_enable_amend(val: bool) -> Option:
    def apply(draft: _Draft) -> None:
        draft.is_amend = val

    return apply


def with_diff_tag_prefix(val: str) -> Option:
    """Diff the two latest tags starting with *val*; empty disables tag mode."""

    def apply(draft: _Draft) -> None:
        draft.diff_tag_prefix = val

    return apply


def with_diff_list(val: Sequence[str]) -> Option:
    def apply(draft: _Draft) -> None:
        draft.diff_list = list(val)

    return apply


def with_commit_id(val: str) -> Option:
    def apply(draft: _Draft) -> None:
        draft.commit_id = val

    return apply


def with_hook_command(val: str) -> Option:
    """Command the installed prepare-commit-msg hook hands the message file to."""

    def apply(draft: _Draft) -> None:
        draft.hook_command = val

    return apply


def build_config(options: Iterable[Option] = ()) -> GitConfig:
    draft = _Draft()
    for option in options:
        option(draft)
    return GitConfig.from_draft(draft)
