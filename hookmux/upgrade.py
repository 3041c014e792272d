"""Migrate legacy [tool.hookmux.scripts] entries to the [hooks] table."""

from pathlib import Path

from .config import loadConfig, loadPackageMetadata, removeLegacyScripts, writeHooks
from .hooks import GIT_HOOKS
from .models import legacyScriptName

_HOOK_BY_SCRIPT = {legacyScriptName(h): h for h in GIT_HOOKS}


def migrateLegacyScripts(
    cwd: Path | None = None, dry_run: bool = False
) -> tuple[dict[str, str], list[str]]:
    """Move hook scripts into hookmux.toml. Returns (migrated, skipped)."""
    root = cwd or Path.cwd()
    pkg = loadPackageMetadata(root)
    if pkg is None or not pkg.scripts:
        return {}, []

    current = loadConfig(root)
    migrated: dict[str, str] = {}
    skipped: list[str] = []
    moved_scripts: list[str] = []

    for script_name, command in pkg.scripts.items():
        hook_name = _HOOK_BY_SCRIPT.get(script_name)
        if hook_name is None or pkg.command(hook_name) is None:
            continue
        if current.command(hook_name) is not None:
            skipped.append(hook_name)
            continue
        migrated[hook_name] = command
        moved_scripts.append(script_name)

    if migrated and not dry_run:
        writeHooks(root, migrated)
        removeLegacyScripts(root, moved_scripts)

    return migrated, skipped
