"""TOML configuration loading for hookmux.

Two generations of hook configuration are supported:

* current: a ``[hooks]`` table in ``hookmux.toml`` and/or ``[tool.hookmux.hooks]``
  in ``pyproject.toml``, merged with the dedicated file taking precedence.
* legacy: ``[tool.hookmux.scripts]`` in ``pyproject.toml``, keyed by hook name
  with hyphens removed (``precommit = "pytest"``).
"""

import logging
import sys
import tomllib
from pathlib import Path

import tomlkit

from .models import HookmuxConfig, PackageMetadata

CONFIG_FILENAME = "hookmux.toml"
PYPROJECT_FILENAME = "pyproject.toml"

logger = logging.getLogger("hookmux")


def configExists(cwd: Path | None = None) -> bool:
    """Check if a dedicated hookmux.toml exists."""
    root = cwd or Path.cwd()
    return (root / CONFIG_FILENAME).is_file()


def _readToml(p: Path) -> dict | None:
    """Parse a TOML file, None if missing. Exits on invalid TOML."""
    if not p.is_file():
        return None

    try:
        with open(p, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Error: Invalid TOML in {p}: {e}")
        sys.exit(1)


def _toolTable(raw: dict) -> dict:
    tool = raw.get("tool", {})
    table = tool.get("hookmux", {}) if isinstance(tool, dict) else {}
    return table if isinstance(table, dict) else {}


def loadConfig(cwd: Path | None = None) -> HookmuxConfig:
    """Load the merged current-format config. Returns defaults if nothing is configured."""
    root = cwd or Path.cwd()
    hooks: dict = {}

    pyproject = _readToml(root / PYPROJECT_FILENAME)
    if pyproject is not None:
        tool = dict(_toolTable(pyproject))
        # Legacy scripts live beside hooks but are read by loadPackageMetadata
        tool.pop("scripts", None)
        hooks.update(HookmuxConfig(hooks=tool.pop("hooks", {})).hooks)
        if tool:
            HookmuxConfig(**tool)  # warn on unknown [tool.hookmux] keys

    dedicated = _readToml(root / CONFIG_FILENAME)
    if dedicated is not None:
        dedicated = dict(dedicated)
        hooks.update(HookmuxConfig(hooks=dedicated.pop("hooks", {})).hooks)
        if dedicated:
            HookmuxConfig(**dedicated)

    config = HookmuxConfig(hooks=hooks)
    logger.debug("Loaded %d hook(s) from %s", len(config.hooks), root)
    return config


def loadPackageMetadata(cwd: Path | None = None) -> PackageMetadata | None:
    """Load legacy scripts from pyproject.toml.

    A missing pyproject.toml yields None (e.g. after checking out a branch
    without one). Every other read or parse failure propagates.
    """
    root = cwd or Path.cwd()
    p = root / PYPROJECT_FILENAME
    try:
        with open(p, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError:
        return None

    return PackageMetadata(**_toolTable(raw))


def writeHooks(cwd: Path | None, hooks: dict[str, str]) -> Path:
    """Add hooks to hookmux.toml, preserving any existing content."""
    root = cwd or Path.cwd()
    p = root / CONFIG_FILENAME

    doc = tomlkit.parse(p.read_text()) if p.is_file() else tomlkit.document()
    if "hooks" not in doc:
        doc.add("hooks", tomlkit.table())
    tbl = doc["hooks"]
    for name, command in hooks.items():
        tbl[name] = command  # type: ignore[index]

    p.write_text(tomlkit.dumps(doc))
    return p


def removeLegacyScripts(cwd: Path | None, script_names: list[str]) -> Path:
    """Drop scripts from [tool.hookmux.scripts], removing the table once empty."""
    root = cwd or Path.cwd()
    p = root / PYPROJECT_FILENAME

    doc = tomlkit.parse(p.read_text())
    tool = doc["tool"]["hookmux"]  # type: ignore[index]
    scripts = tool["scripts"]  # type: ignore[index]
    for name in script_names:
        scripts.pop(name, None)  # type: ignore[union-attr]
    if not scripts:
        del tool["scripts"]  # type: ignore[union-attr]

    p.write_text(tomlkit.dumps(doc))
    return p
