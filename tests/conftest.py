"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

HOOKMUX_TOML = """\
[hooks]
pre-commit = "echo ok"
commit-msg = "echo msg"
"""

PYPROJECT_WITH_HOOKS = """\
[project]
name = "demo"

[tool.hookmux.hooks]
pre-commit = "echo from-pyproject"
post-merge = "echo merged"
"""

PYPROJECT_WITH_SCRIPTS = """\
[project]
name = "demo"

# legacy hook scripts
[tool.hookmux.scripts]
prepush = "run-tests"
precommit = "pytest -q"
lint = "ruff check ."
"""


@pytest.fixture(autouse=True)
def _clean_hook_env(monkeypatch):
    monkeypatch.delenv("HOOKMUX_GIT_PARAMS", raising=False)
    monkeypatch.delenv("HOOKMUX_GIT_STDIN", raising=False)
    monkeypatch.delenv("HOOKMUX_DEBUG", raising=False)


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("hookmux")
    handlers, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def hookmux_toml(project_dir: Path) -> Path:
    p = project_dir / "hookmux.toml"
    p.write_text(HOOKMUX_TOML)
    return p


@pytest.fixture
def pyproject_hooks(project_dir: Path) -> Path:
    p = project_dir / "pyproject.toml"
    p.write_text(PYPROJECT_WITH_HOOKS)
    return p


@pytest.fixture
def pyproject_scripts(project_dir: Path) -> Path:
    p = project_dir / "pyproject.toml"
    p.write_text(PYPROJECT_WITH_SCRIPTS)
    return p
