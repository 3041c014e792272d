"""hookmux - git hooks configured in hookmux.toml or pyproject.toml."""

__version__ = "0.1.0"
__author__ = "hookmux Contributors"

from .config import loadConfig, loadPackageMetadata
from .hooks import runCommand
from .models import HookmuxConfig, PackageMetadata
from .runner import run
from .upgrade import migrateLegacyScripts

__all__ = [
    "HookmuxConfig",
    "PackageMetadata",
    "loadConfig",
    "loadPackageMetadata",
    "migrateLegacyScripts",
    "run",
    "runCommand",
]
