"""Load options from .gitprep.toml / .gitprep.yaml and GITPREP_* env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitprep.config.options import (
    Option,
    with_diff_tag_prefix,
    with_diff_unified,
    with_enable_amend,
    with_exclude_list,
    with_hook_command,
)

CONFIG_FILE_NAMES = (".gitprep.toml", ".gitprep.yaml", ".gitprep.yml")
ENV_PREFIX = "GITPREP_"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for name in CONFIG_FILE_NAMES:
        candidate = repo_root / name
        if candidate.is_file():
            return candidate
    return None


def _parse_file(path: Path) -> Dict[str, Any]:
    try:
        if path.suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: top level must be a mapping")
    return data


def _section(data: Dict[str, Any], name: str, path: Path) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Failed to parse {path}: [{name}] must be a mapping")
    return section


def _file_options(data: Dict[str, Any], path: Path) -> List[Option]:
    git = _section(data, "git", path)
    hook = _section(data, "hook", path)
    options: List[Option] = []
    if "diff_unified" in git:
        options.append(with_diff_unified(git["diff_unified"]))
    if "exclude_list" in git:
        exclude_list = git["exclude_list"] or []
        if not isinstance(exclude_list, list):
            raise ConfigError(f"Failed to parse {path}: git.exclude_list must be a list")
        options.append(with_exclude_list(exclude_list))
    if "amend" in git:
        options.append(with_enable_amend(bool(git["amend"])))
    if "tag_prefix" in git:
        options.append(with_diff_tag_prefix(git["tag_prefix"] or ""))
    if "command" in hook:
        options.append(with_hook_command(hook["command"]))
    return options


def _env_options() -> List[Option]:
    """Apply GITPREP_* environment variable overrides."""
    options: List[Option] = []
    if val := os.environ.get(f"{ENV_PREFIX}DIFF_UNIFIED"):
        try:
            options.append(with_diff_unified(int(val)))
        except ValueError:
            pass
    if val := os.environ.get(f"{ENV_PREFIX}EXCLUDE_LIST"):
        options.append(with_exclude_list([p.strip() for p in val.split(",") if p.strip()]))
    if val := os.environ.get(f"{ENV_PREFIX}AMEND"):
        options.append(with_enable_amend(val.lower() in ("1", "true", "yes")))
    if (val := os.environ.get(f"{ENV_PREFIX}TAG_PREFIX")) is not None:
        options.append(with_diff_tag_prefix(val))
    if val := os.environ.get(f"{ENV_PREFIX}HOOK_COMMAND"):
        options.append(with_hook_command(val))
    return options


def load_options(repo_root: Path, config_override: Optional[str] = None) -> List[Option]:
    """Return options from the config file followed by env overrides."""
    config_path = find_config_file(repo_root, config_override)
    options: List[Option] = []
    if config_path is not None:
        options.extend(_file_options(_parse_file(config_path), config_path))
    options.extend(_env_options())
    return options
