"""prepare-commit-msg hook installer — install / uninstall.

The hook has two states, absent and present. Installing over an existing
file and removing a missing one are both refused.
"""

from __future__ import annotations

from pathlib import Path

from gitprep.hooks.templates import HOOK_PREPARE_COMMIT_MESSAGE

HOOK_MODE = 0o755


class HookError(Exception):
    """Raised when the hook file is not in the state an action needs."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class HookExistsError(HookError):
    pass


class HookNotFoundError(HookError):
    pass


def hook_target(hooks_dir: Path) -> Path:
    return hooks_dir / HOOK_PREPARE_COMMIT_MESSAGE


def ensure_absent(hooks_dir: Path) -> Path:
    """Return the hook path, or raise HookExistsError if a hook file is there."""
    hook_path = hook_target(hooks_dir)
    if hook_path.is_file():
        raise HookExistsError(
            f"hook file {HOOK_PREPARE_COMMIT_MESSAGE} exists: {hook_path}", hook_path
        )
    return hook_path


def install_hook(hooks_dir: Path, content: bytes) -> Path:
    """Write *content* as an executable hook. Returns the hook path."""
    hook_path = ensure_absent(hooks_dir)
    hook_path.write_bytes(content)
    hook_path.chmod(HOOK_MODE)
    return hook_path


def uninstall_hook(hooks_dir: Path) -> Path:
    """Remove the hook. Returns the path it was removed from."""
    hook_path = hook_target(hooks_dir)
    if not hook_path.is_file():
        raise HookNotFoundError(
            f"hook file {HOOK_PREPARE_COMMIT_MESSAGE} does not exist: {hook_path}", hook_path
        )

    hook_path.unlink()
    return hook_path
