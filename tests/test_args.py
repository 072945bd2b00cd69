"""Tests for mode selection and git argument vectors."""

from gitprep.config.options import (
    build_config,
    with_diff_tag_prefix,
    with_diff_unified,
    with_enable_amend,
    with_exclude_list,
)
from gitprep.git import args as gitargs
from gitprep.git.models import Amend, Staged, TagPair, TagRange

EXCLUDES = [
    ":(exclude,top)package-lock.json",
    ":(exclude,top)pnpm-lock.yaml",
    ":(exclude,top)*.lock",
    ":(exclude,top)go.sum",
]


class TestSelectMode:
    def test_staged_by_default(self):
        assert gitargs.select_mode(build_config(), None) == Staged()

    def test_amend(self):
        cfg = build_config([with_enable_amend(True)])
        assert gitargs.select_mode(cfg, None) == Amend()

    def test_tag_range_with_pair(self):
        cfg = build_config([with_diff_tag_prefix("v1."), with_enable_amend(True)])
        mode = gitargs.select_mode(cfg, TagPair("v1.2.0", "v1.1.0"))
        assert mode == TagRange("v1.2.0", "v1.1.0")

    def test_tag_prefix_without_pair_falls_back_to_staged(self):
        cfg = build_config([with_diff_tag_prefix("v1.")])
        assert gitargs.select_mode(cfg, None) == Staged()

    def test_tag_prefix_without_pair_falls_back_to_amend(self):
        cfg = build_config([with_diff_tag_prefix("v1."), with_enable_amend(True)])
        assert gitargs.select_mode(cfg, None) == Amend()

    def test_pair_ignored_without_prefix(self):
        assert gitargs.select_mode(build_config(), TagPair("a", "b")) == Staged()


class TestDiffNamesArgs:
    def test_staged(self):
        args = gitargs.diff_names_args(build_config(), Staged())
        assert args == ["diff", "--name-only", "--staged", *EXCLUDES]

    def test_amend(self):
        args = gitargs.diff_names_args(build_config(), Amend())
        assert args[:4] == ["diff", "--name-only", "HEAD^", "HEAD"]

    def test_tag_range(self):
        args = gitargs.diff_names_args(build_config(), TagRange("v2", "v1"))
        assert args[2:4] == ["v2", "v1"]

    def test_extra_exclusions_last(self):
        cfg = build_config([with_exclude_list(["dist/*"])])
        args = gitargs.diff_names_args(cfg, Staged())
        assert args[-1] == ":(exclude,top)dist/*"
        assert args[3:7] == EXCLUDES


class TestDiffFilesArgs:
    def test_flags_and_context(self):
        cfg = build_config([with_diff_unified(7)])
        args = gitargs.diff_files_args(cfg, Staged())
        assert args == [
            "diff",
            "--ignore-all-space",
            "--diff-algorithm=minimal",
            "--unified=7",
            "--staged",
            *EXCLUDES,
        ]

    def test_default_context(self):
        assert "--unified=3" in gitargs.diff_files_args(build_config(), Staged())

    def test_negative_context_unchecked(self):
        cfg = build_config([with_diff_unified(-2)])
        assert "--unified=-2" in gitargs.diff_files_args(cfg, Staged())

    def test_amend_range(self):
        args = gitargs.diff_files_args(build_config(), Amend())
        assert args[4:6] == ["HEAD^", "HEAD"]
        assert "--staged" not in args


class TestCommitArgs:
    def test_plain(self):
        assert gitargs.commit_args("feat: add x") == [
            "commit", "--no-verify", "--signoff", "--message=feat: add x",
        ]

    def test_amend(self):
        args = gitargs.commit_args("fix", amend=True)
        assert args[-1] == "--amend"

    def test_message_kept_as_single_arg(self):
        args = gitargs.commit_args("line one\n\nbody; rm -rf /")
        assert args[3] == "--message=line one\n\nbody; rm -rf /"


class TestQueryArgs:
    def test_git_dir(self):
        assert gitargs.git_dir_args() == ["rev-parse", "--git-dir"]

    def test_hook_path(self):
        assert gitargs.hook_path_args() == ["rev-parse", "--git-path", "hooks"]

    def test_tag_list(self):
        assert gitargs.tag_list_args() == ["tag", "--sort=-creatordate"]
