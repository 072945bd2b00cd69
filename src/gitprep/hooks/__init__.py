"""prepare-commit-msg hook installation and templates."""

from gitprep.hooks.installer import (
    HookError,
    HookExistsError,
    HookNotFoundError,
    ensure_absent,
    hook_target,
    install_hook,
    uninstall_hook,
)
from gitprep.hooks.templates import HOOK_PREPARE_COMMIT_MESSAGE, TemplateError, render_template

__all__ = [
    "HOOK_PREPARE_COMMIT_MESSAGE",
    "HookError",
    "HookExistsError",
    "HookNotFoundError",
    "TemplateError",
    "ensure_absent",
    "hook_target",
    "install_hook",
    "render_template",
    "uninstall_hook",
]
