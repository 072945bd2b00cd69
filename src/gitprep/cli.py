"""gitprep CLI — Typer application with diff, commit, hook, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from gitprep import __version__
from gitprep.config.loader import ConfigError, load_options
from gitprep.config.options import (
    Option,
    with_diff_tag_prefix,
    with_diff_unified,
    with_enable_amend,
    with_exclude_list,
)
from gitprep.git.adapter import GitError, get_repo_root
from gitprep.git.command import Command, NoStagedChangesError

app = typer.Typer(
    name="gitprep",
    help="Select, build, and run the git diff behind a commit message.",
    add_completion=False,
    no_args_is_help=True,
)
hook_app = typer.Typer(help="Manage the prepare-commit-msg hook.", no_args_is_help=True)
app.add_typer(hook_app, name="hook")

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _build_command(repo_root: Path, config: Optional[str], cli_options: List[Option]) -> Command:
    """File and env options first, CLI flags last so they win."""
    try:
        options = load_options(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    return Command(*options, *cli_options, cwd=repo_root)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    unified: Optional[int] = typer.Option(None, "--unified", "-U", help="Lines of context"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Extra path pattern to exclude"),
    amend: Optional[bool] = typer.Option(None, "--amend/--no-amend", help="Diff HEAD^..HEAD instead of staged changes"),
    tag_prefix: Optional[str] = typer.Option(None, "--tag-prefix", "-t", help="Diff the two newest tags with this prefix"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitprep.toml or .gitprep.yaml"),
    name_only: bool = typer.Option(False, "--name-only", help="List file names only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Print the diff of staged changes, the last commit, or a tag range."""
    from gitprep.git import args as gitargs

    repo_root = _resolve_repo_root()

    cli_options: List[Option] = []
    if unified is not None:
        cli_options.append(with_diff_unified(unified))
    if exclude:
        cli_options.append(with_exclude_list(exclude))
    if amend is not None:
        cli_options.append(with_enable_amend(amend))
    if tag_prefix is not None:
        cli_options.append(with_diff_tag_prefix(tag_prefix))
    cmd = _build_command(repo_root, config, cli_options)

    try:
        if verbose:
            mode = cmd.diff_mode()
            console.print(f"[dim]Repo root: {repo_root}[/dim]")
            console.print(f"[dim]Diff mode: {mode}[/dim]")
            console.print(f"[dim]git {' '.join(gitargs.diff_files_args(cmd.config, mode))}[/dim]")
        if name_only:
            for name in cmd.diff_names():
                print(name)
            raise typer.Exit(code=0)
        text = cmd.diff_files()
    except NoStagedChangesError as exc:
        console.print(f"[yellow]⚠[/yellow]  {exc}")
        raise typer.Exit(code=1) from exc
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    print(text, end="")


# ── commit ────────────────────────────────────────────────────────────────────


@app.command()
def commit(
    message: str = typer.Argument(..., help="Commit message"),
    amend: bool = typer.Option(False, "--amend", help="Amend the previous commit"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitprep.toml or .gitprep.yaml"),
) -> None:
    """Commit with --no-verify and --signoff."""
    repo_root = _resolve_repo_root()
    cli_options: List[Option] = [with_enable_amend(True)] if amend else []
    cmd = _build_command(repo_root, config, cli_options)

    try:
        output = cmd.commit(message)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    print(output, end="")


# ── git-dir ───────────────────────────────────────────────────────────────────


@app.command("git-dir")
def git_dir() -> None:
    """Show the path of the git directory."""
    try:
        output = Command().git_dir()
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    print(output, end="")


# ── tags ──────────────────────────────────────────────────────────────────────


@app.command()
def tags(
    tag_prefix: Optional[str] = typer.Option(None, "--tag-prefix", "-t", help="Tag name prefix"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitprep.toml or .gitprep.yaml"),
) -> None:
    """Show whether tag mode is on and which two tags it would diff."""
    repo_root = _resolve_repo_root()
    cli_options: List[Option] = [with_diff_tag_prefix(tag_prefix)] if tag_prefix is not None else []
    cmd = _build_command(repo_root, config, cli_options)

    is_tag, tag1, tag2 = cmd.is_diff_tag()
    if not is_tag:
        console.print("[dim]Tag mode is off (no tag prefix configured).[/dim]")
        raise typer.Exit(code=0)
    if not (tag1 and tag2):
        console.print(
            f"[yellow]⚠[/yellow]  Fewer than two tags match {cmd.config.diff_tag_prefix!r}; "
            "diff falls back to staged changes."
        )
        raise typer.Exit(code=0)
    print(f"{tag1} {tag2}")


# ── hook ──────────────────────────────────────────────────────────────────────


@hook_app.command("install")
def hook_install(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitprep.toml or .gitprep.yaml"),
) -> None:
    """Install the prepare-commit-msg hook."""
    from gitprep.hooks import HookError, TemplateError

    repo_root = _resolve_repo_root()
    cmd = _build_command(repo_root, config, [])
    try:
        path = cmd.install_hook()
    except HookError as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except (GitError, TemplateError, OSError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    console.print(f"[green]✓[/green] Installed prepare-commit-msg hook at {path}")


@hook_app.command("uninstall")
def hook_uninstall() -> None:
    """Remove the prepare-commit-msg hook."""
    from gitprep.hooks import HookError

    repo_root = _resolve_repo_root()
    try:
        path = Command(cwd=repo_root).uninstall_hook()
    except HookError as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except (GitError, OSError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    console.print(f"[green]✓[/green] Removed prepare-commit-msg hook from {path}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitprep.toml in the repo root."""
    from gitprep.config.defaults import DEFAULT_TOML

    repo_root = _resolve_repo_root()
    config_path = repo_root / ".gitprep.toml"

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  .gitprep.toml already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitprep {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitprep — select, build, and run the git diff behind a commit message."""
