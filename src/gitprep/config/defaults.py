"""Starter .gitprep.toml template."""

DEFAULT_TOML = """\
# gitprep configuration

[git]
diff_unified = 3            # lines of context around each change
# exclude_list = ["dist/*"] # appended to package-lock.json, pnpm-lock.yaml, *.lock, go.sum
amend = false               # diff HEAD^..HEAD instead of the staged changes
tag_prefix = ""             # e.g. "v1." diffs the two newest v1.* tags

[hook]
command = "codegpt commit --preview --file"
"""
