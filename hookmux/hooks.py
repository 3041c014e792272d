"""Git hook resolution and execution for hookmux."""

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .config import loadConfig, loadPackageMetadata

# Hooks git feeds on stdin; the text is forwarded through the environment
HOOKS_WITH_STDIN = frozenset({"pre-push", "pre-receive", "post-receive", "post-rewrite"})

# Hooks whose git command accepts --no-verify
VERIFIABLE_HOOKS = frozenset({"commit-msg", "pre-commit", "pre-rebase", "pre-push"})

GIT_HOOKS = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)

PARAMS_ENV = "HOOKMUX_GIT_PARAMS"
STDIN_ENV = "HOOKMUX_GIT_STDIN"

logger = logging.getLogger("hookmux")
console = Console(highlight=False, soft_wrap=True)


@dataclass(frozen=True)
class Spawned:
    """Shell ran to completion."""

    status: int


@dataclass(frozen=True)
class SpawnFailed:
    """Shell could not be started."""

    error: OSError


SpawnResult = Spawned | SpawnFailed


def resolveLegacyCommand(cwd: Path, hook_name: str) -> str | None:
    """Command from [tool.hookmux.scripts], or None."""
    pkg = loadPackageMetadata(cwd)
    return pkg.command(hook_name) if pkg is not None else None


def resolveCommand(cwd: Path, hook_name: str) -> str | None:
    """Command from the merged [hooks] config, or None."""
    return loadConfig(cwd).command(hook_name)


def readsStdin(hook_name: str) -> bool:
    return hook_name in HOOKS_WITH_STDIN


def buildEnv(git_params: str | None = None, git_stdin: str | None = None) -> dict[str, str]:
    """Child environment: a copy of os.environ plus the git event context."""
    env = dict(os.environ)
    if git_params:
        env[PARAMS_ENV] = git_params
    if git_stdin is not None:
        env[STDIN_ENV] = git_stdin
    return env


def spawnShell(cwd: Path, command: str, env: dict[str, str]) -> SpawnResult:
    """Run a command through $SHELL -c, inheriting stdio."""
    shell = os.environ.get("SHELL") or "sh"
    logger.debug("Spawning %s -c %r in %s", shell, command, cwd)
    try:
        result = subprocess.run([shell, "-c", command], cwd=cwd, env=env)
    except OSError as e:
        return SpawnFailed(e)

    # Negative return codes mean the shell was killed by a signal: no status
    return Spawned(max(result.returncode, 0))


def bypassHint(hook_name: str) -> str:
    if hook_name in VERIFIABLE_HOOKS:
        return "(add --no-verify to bypass)"
    return "(cannot be bypassed with --no-verify due to Git specs)"


def runCommand(cwd: Path, hook_name: str, command: str, env: dict[str, str]) -> int:
    """Run a hook command. Returns its exit status, or 1 if the shell failed to start."""
    version = sys.version.split()[0]
    console.print(f"hookmux > {hook_name} (python {version})", markup=False)

    result = spawnShell(cwd, command, env)
    if isinstance(result, Spawned):
        logger.debug("%s exited with %d", hook_name, result.status)
        return result.status

    console.print(f"hookmux > {hook_name} hook failed {bypassHint(hook_name)}", markup=False)
    console.print({"err": result.error})
    return 1
