"""Single hook invocation: resolve, prepare the environment, execute."""

import asyncio
import logging
import os
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

from .hooks import buildEnv, console, readsStdin, resolveCommand, resolveLegacyCommand, runCommand

logger = logging.getLogger("hookmux")

DEPRECATION_WARNING = """
Warning: Setting {hook_name} script in [tool.hookmux.scripts] will be deprecated.
Please move it to [hooks] in hookmux.toml or [tool.hookmux.hooks] in pyproject.toml.

For an automatic update you can also run:
hookmux upgrade
"""


def setupLogging() -> logging.Logger:
    """Log to stderr, at DEBUG when HOOKMUX_DEBUG is set."""
    debug = os.environ.get("HOOKMUX_DEBUG", "").lower() not in ("", "0", "false", "no")
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


async def readStdin() -> str:
    """Read all of stdin. Returns an empty string when attached to a terminal."""
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    return await asyncio.to_thread(sys.stdin.read)


async def run(
    argv: list[str],
    *,
    cwd: Path | None = None,
    readStdinFn: Callable[[], Awaitable[str]] = readStdin,
) -> int:
    """Run the hook named by argv[2] (argv[3] is passed on as git params).

    Returns the exit status for the calling git hook: 0 when nothing is
    configured, the command's status otherwise.
    """
    hook_name = argv[2] if len(argv) > 2 else ""
    git_params = argv[3] if len(argv) > 3 else None
    root = cwd or Path.cwd()

    legacy_command = resolveLegacyCommand(root, hook_name)
    command = resolveCommand(root, hook_name)
    logger.debug("%s: hooks=%r scripts=%r", hook_name, command, legacy_command)

    git_stdin = None
    if readsStdin(hook_name):
        git_stdin = await readStdinFn()
        logger.debug("Captured %d chars of stdin for %s", len(git_stdin), hook_name)

    env = buildEnv(git_params, git_stdin)

    if command:
        return runCommand(root, hook_name, command, env)

    if legacy_command:
        console.print(DEPRECATION_WARNING.format(hook_name=hook_name), style="red", markup=False)
        return runCommand(root, hook_name, legacy_command, env)

    return 0


def main():
    """Entry point for git hook scripts: hookmux-run <hook-name> [git params...]."""
    setupLogging()
    argv = hookArgv(sys.argv[0], sys.argv[1:])
    sys.exit(asyncio.run(run(argv)))


def hookArgv(script: str, args: list[str]) -> list[str]:
    """[python, script, hook, "param param ..."]: git params join into one string."""
    argv = [sys.executable, script, *args[:1]]
    if len(args) > 1:
        argv.append(" ".join(args[1:]))
    return argv


if __name__ == "__main__":
    main()
