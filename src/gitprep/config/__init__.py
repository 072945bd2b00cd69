"""Configuration options, schema, and file/env loading."""

from gitprep.config.loader import ConfigError, load_options
from gitprep.config.options import (
    Option,
    build_config,
    with_commit_id,
    with_diff_list,
    with_diff_tag_prefix,
    with_diff_unified,
    with_enable_amend,
    with_exclude_list,
    with_hook_command,
)
from gitprep.config.schema import EXCLUDE_FROM_DIFF, GitConfig

__all__ = [
    "EXCLUDE_FROM_DIFF",
    "ConfigError",
    "GitConfig",
    "Option",
    "build_config",
    "load_options",
    "with_commit_id",
    "with_diff_list",
    "with_diff_tag_prefix",
    "with_diff_unified",
    "with_enable_amend",
    "with_exclude_list",
    "with_hook_command",
]
