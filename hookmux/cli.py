"""Typer-based CLI interface for hookmux."""

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import CONFIG_FILENAME, configExists, loadConfig, loadPackageMetadata
from .hooks import GIT_HOOKS
from .runner import hookArgv, run, setupLogging
from .upgrade import migrateLegacyScripts

app = typer.Typer(
    name="hookmux",
    help="Run git hooks from hookmux.toml or pyproject.toml",
    epilog="Git hook scripts call hookmux-run <hook-name> directly.",
    rich_markup_mode="rich",
)

console = Console()


@app.command(name="run")
def run_hook(
    hook: str = typer.Argument(..., help="Git hook name, e.g. pre-commit"),
    params: list[str] | None = typer.Argument(None, help="Arguments git passed to the hook"),
):
    """Run the command configured for a git hook."""
    setupLogging()
    argv = hookArgv("hookmux", [hook, *(params or [])])
    status = asyncio.run(run(argv))
    raise typer.Exit(code=status)


@app.command(name="list")
def list_hooks():
    """List configured hooks and where they come from."""
    config = loadConfig()
    pkg = loadPackageMetadata()

    table = Table(title="Configured Hooks")
    table.add_column("Hook", style="magenta")
    table.add_column("Command", style="cyan")
    table.add_column("Source", style="green")

    for hook_name in config.hooks:
        command = config.command(hook_name)
        if command is None:
            continue
        table.add_row(escape(hook_name), escape(command), "hooks")

    for hook_name in GIT_HOOKS:
        command = pkg.command(hook_name) if pkg is not None else None
        if command is None:
            continue
        source = "scripts (deprecated)"
        if config.command(hook_name) is not None:
            source += ", shadowed"
        table.add_row(escape(hook_name), escape(command), source, style="dim")

    if table.row_count == 0:
        console.print("No hooks configured", style="yellow")
        return

    console.print(table)


@app.command()
def upgrade(
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would move without writing"),
):
    """Move legacy hook scripts from pyproject.toml to hookmux.toml."""
    had_config = configExists()
    migrated, skipped = migrateLegacyScripts(dry_run=dry_run)

    if not migrated and not skipped:
        console.print("Nothing to upgrade")
        return

    verb = "Would move" if dry_run else "Moved"
    for hook_name, command in migrated.items():
        console.print(f"{verb} {escape(hook_name)}: {escape(command)}")
    if migrated and not dry_run and not had_config:
        console.print(f"Created {CONFIG_FILENAME}")
    for hook_name in skipped:
        console.print(f"Skipped {escape(hook_name)}: already set in \\[hooks]", style="yellow")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
