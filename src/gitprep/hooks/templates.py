"""Named hook script templates."""

from __future__ import annotations

from typing import Any, Dict, Optional

HOOK_PREPARE_COMMIT_MESSAGE = "prepare-commit-msg"

_TEMPLATES: Dict[str, str] = {
    HOOK_PREPARE_COMMIT_MESSAGE: """\
#!/bin/sh
# gitprep prepare-commit-msg hook
# To uninstall: gitprep hook uninstall

# $1 is the message file, $2 the message source
case "$2" in
    merge|squash) exit 0 ;;
esac

exec {command} "$1"
""",
}


class TemplateError(Exception):
    """Raised for an unknown template name or a missing placeholder value."""


def render_template(name: str, data: Optional[Dict[str, Any]] = None) -> bytes:
    """Render template *name* with *data* and return UTF-8 bytes."""
    try:
        template = _TEMPLATES[name]
    except KeyError:
        raise TemplateError(f"unknown template: {name}") from None
    try:
        return template.format(**(data or {})).encode("utf-8")
    except KeyError as exc:
        raise TemplateError(f"template {name} needs a value for {exc.args[0]!r}") from exc
